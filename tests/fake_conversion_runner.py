"""FakeConversionRunner: test double for ConversionRunner."""

from ralph.import_bridge.conversion_runner import ConversionResult


class FakeConversionRunner:
    """Records calls and returns canned ConversionResults.

    ``help_output`` is returned for ``<tool> --help``; set it to None to
    simulate a tool that is not installed.
    """

    def __init__(self, help_output=None, returncode=0):
        self.help_output = help_output
        self.returncode = returncode
        self.calls = []
        self.seen_input = None
        self.on_run = None

    def capture(self, cmd, cwd):
        self.calls.append(("capture", cmd, cwd))
        if self.help_output is None:
            raise FileNotFoundError(cmd[0])
        return ConversionResult(returncode=0, output=self.help_output)

    def run(self, cmd, cwd):
        self.calls.append(("run", cmd, cwd))
        return ConversionResult(returncode=self.returncode)

    def run_with_files(self, cmd, input_path, output_path, cwd):
        self.calls.append(("run_with_files", cmd, cwd))
        with open(input_path) as f:
            self.seen_input = f.read()
        with open(output_path, "w") as f:
            f.write("{}")
        if self.on_run:
            self.on_run()
        return ConversionResult(returncode=self.returncode)
