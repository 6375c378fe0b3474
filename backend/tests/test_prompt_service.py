import os

import pytest

from app.core.errors import (
    AnalysisFailed,
    EmptyInput,
    GenerationFailed,
    InvalidUpload,
    MissingFile,
    RateLimited,
    UnknownPlatform,
)
from app.services.prompt_service import GeneratedPrompt, PromptService
from app.services.prompt_templates import SORA_SYSTEM_PROMPT, VEO_SYSTEM_PROMPT

from fakes import FakeCompletionClient, FakeMediaClient

MB = 1024 * 1024


def _service(registry, upload_dir, completion=None, media=None):
    return PromptService(
        registry=registry,
        completion_client=completion or FakeCompletionClient(),
        media_client=media or FakeMediaClient(),
        temp_dir=str(upload_dir),
    )


# ==================== DESCRIPTION PATH ====================

def test_description_uses_veo_template(service, completion_client):
    result = service.generate_from_description("a cat on a skateboard", "veo-3.1")

    assert result == GeneratedPrompt(text="generated prompt", platform="Veo 3.1")
    assert len(completion_client.calls) == 1

    system_text, user_text = completion_client.calls[0]
    assert system_text == VEO_SYSTEM_PROMPT
    assert '"a cat on a skateboard"' in user_text
    assert "for Veo 3.1" in user_text


def test_description_returns_provider_text_verbatim(registry, upload_dir):
    reply = "  Medium shot: a tabby cat...\n\nSFX: wheels on asphalt  "
    service = _service(registry, upload_dir, completion=FakeCompletionClient(reply=reply))

    assert service.generate_from_description("cat", "sora-2").text == reply


@pytest.mark.parametrize("description,platform", [
    ("", "veo-3.1"),
    ("   \n", "veo-3.1"),
    (None, "veo-3.1"),
    ("a cat", ""),
    ("a cat", None),
])
def test_description_missing_fields(service, completion_client, description, platform):
    with pytest.raises(EmptyInput) as exc_info:
        service.generate_from_description(description, platform)

    assert exc_info.value.message == "Description and platform are required"
    assert completion_client.calls == []


@pytest.mark.parametrize("platform", ["Veo-3.1", "sora", "sora-2 ", "runway"])
def test_description_unknown_platform_skips_provider(service, completion_client, platform):
    with pytest.raises(UnknownPlatform):
        service.generate_from_description("a cat", platform)
    assert completion_client.calls == []


def test_description_rate_limit_propagates(registry, upload_dir):
    service = _service(registry, upload_dir, completion=FakeCompletionClient(error=RateLimited()))

    with pytest.raises(RateLimited):
        service.generate_from_description("a cat", "veo-3.1")


def test_description_provider_failure_keeps_message(registry, upload_dir):
    service = _service(registry, upload_dir, completion=FakeCompletionClient(error=GenerationFailed("model overloaded")))

    with pytest.raises(GenerationFailed) as exc_info:
        service.generate_from_description("a cat", "veo-3.1")
    assert exc_info.value.message == "model overloaded"


def test_description_unexpected_error_becomes_generation_failed(registry, upload_dir):
    service = _service(registry, upload_dir, completion=FakeCompletionClient(error=RuntimeError("upstream socket reset")))

    with pytest.raises(GenerationFailed) as exc_info:
        service.generate_from_description("a cat", "veo-3.1")
    assert exc_info.value.message == "upstream socket reset"
    assert exc_info.value.status_code == 500


def test_description_unexpected_error_without_message(registry, upload_dir):
    service = _service(registry, upload_dir, completion=FakeCompletionClient(error=RuntimeError()))

    with pytest.raises(GenerationFailed) as exc_info:
        service.generate_from_description("a cat", "veo-3.1")
    assert exc_info.value.message == "Failed to generate prompt. Please try again."


# ==================== VIDEO PATH ====================

def test_video_sora_analysis(registry, upload_dir):
    seen_files = []
    media = FakeMediaClient(reply="sora prompt", on_call=lambda: seen_files.extend(os.listdir(upload_dir)))
    service = _service(registry, upload_dir, media=media)
    data = b"\x00\x00\x00\x18ftypmp42" + b"\x01" * (2 * MB)

    result = service.generate_from_video(data, "video/mp4", "sora-2")

    assert result.to_response() == {"prompt": "sora prompt", "platform": "Sora 2"}
    assert len(media.calls) == 1
    sent_data, sent_mime, instruction = media.calls[0]
    assert sent_data == data
    assert sent_mime == "video/mp4"
    assert SORA_SYSTEM_PROMPT in instruction
    assert "create a professional prompt for Sora 2" in instruction

    # a temp file existed during the call and is gone afterwards
    assert len(seen_files) == 1
    assert seen_files[0].endswith(".mp4")
    assert os.listdir(upload_dir) == []


@pytest.mark.parametrize("error", [RateLimited(), AnalysisFailed("quota"), GenerationFailed("boom")])
def test_video_provider_failure_cleans_up(registry, upload_dir, error):
    media = FakeMediaClient(error=error)
    service = _service(registry, upload_dir, media=media)

    with pytest.raises(AnalysisFailed) as exc_info:
        service.generate_from_video(b"video", "video/webm", "veo-3.1")

    assert exc_info.value.message == "Failed to analyze video. Please try again."
    assert len(media.calls) == 1
    assert os.listdir(upload_dir) == []


def test_video_unexpected_error_cleans_up(registry, upload_dir):
    service = _service(registry, upload_dir, media=FakeMediaClient(error=RuntimeError("socket closed")))

    with pytest.raises(RuntimeError):
        service.generate_from_video(b"video", "video/mp4", "veo-3.1")
    assert os.listdir(upload_dir) == []


@pytest.mark.parametrize("data", [b"", None])
def test_video_missing_file(service, media_client, data):
    with pytest.raises(MissingFile) as exc_info:
        service.generate_from_video(data, "video/mp4", "veo-3.1")
    assert exc_info.value.message == "Video file is required"
    assert media_client.calls == []


def test_video_missing_platform(service, media_client):
    with pytest.raises(EmptyInput) as exc_info:
        service.generate_from_video(b"video", "video/mp4", "")
    assert exc_info.value.message == "Platform is required"
    assert media_client.calls == []


def test_video_unknown_platform(service, media_client, upload_dir):
    with pytest.raises(UnknownPlatform):
        service.generate_from_video(b"video", "video/mp4", "sora-1")
    assert media_client.calls == []
    assert os.listdir(upload_dir) == []


def test_video_too_large(service, media_client, upload_dir):
    with pytest.raises(InvalidUpload) as exc_info:
        service.generate_from_video(b"\x00" * (15 * MB), "video/mp4", "veo-3.1")
    assert exc_info.value.message == "Video file must be less than 10MB"
    assert media_client.calls == []
    assert os.listdir(upload_dir) == []


def test_video_bad_type(service, media_client):
    with pytest.raises(InvalidUpload):
        service.generate_from_video(b"GIF89a", "image/gif", "veo-3.1")
    assert media_client.calls == []
