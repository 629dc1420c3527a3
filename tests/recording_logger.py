"""RecordingLogger: test double for RalphLogger."""


class RecordingLogger:
    """Records (level, message) pairs instead of printing them.

    Usage:
        logger = RecordingLogger()
        logger.warn("careful")
        assert logger.messages("WARN") == ["careful"]
    """

    def __init__(self):
        self.records = []
        self.lines = []

    def log(self, level, message):
        self.records.append((level, message))

    def info(self, message):
        self.log("INFO", message)

    def warn(self, message):
        self.log("WARN", message)

    def error(self, message):
        self.log("ERROR", message)

    def success(self, message):
        self.log("SUCCESS", message)

    def dry_run(self, message):
        self.log("DRY_RUN", message)

    def echo(self, text=""):
        self.lines.append(text)

    def messages(self, level):
        return [message for lvl, message in self.records if lvl == level]
