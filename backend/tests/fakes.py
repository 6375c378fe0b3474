"""Test doubles for the provider clients."""


class FakeCompletionClient:
    """Records complete() calls and returns a canned answer or raises."""

    def __init__(self, reply="generated prompt", error=None):
        self.reply = reply
        self.error = error
        self.calls = []

    def complete(self, system_text, user_text):
        self.calls.append((system_text, user_text))
        if self.error is not None:
            raise self.error
        return self.reply


class FakeMediaClient:
    """Records analyze_media() calls; optionally checks the temp dir mid-call."""

    def __init__(self, reply="video prompt", error=None, on_call=None):
        self.reply = reply
        self.error = error
        self.on_call = on_call
        self.calls = []

    def analyze_media(self, data, mime_type, instruction_text):
        self.calls.append((data, mime_type, instruction_text))
        if self.on_call is not None:
            self.on_call()
        if self.error is not None:
            raise self.error
        return self.reply
