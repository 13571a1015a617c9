"""General utility functions"""
import sys
import signal
import subprocess
from dataclasses import dataclass
from typing import Optional, Union


def safe_print(msg):
    """Print with handling for surrogate characters that can't be encoded"""
    try:
        print(msg)
    except UnicodeEncodeError:
        # Replace problematic characters with safe representation
        safe_msg = msg.encode('utf-8', errors='replace').decode('utf-8')
        print(safe_msg)
    sys.stdout.flush()


@dataclass(frozen=True)
class CommandResult:
    """Outcome of an external command, decoded from its raw return code."""

    exit_code: Optional[int]
    terminating_signal: Optional[Union[signal.Signals, int]] = None

    @property
    def succeeded(self):
        return self.exit_code == 0

    @classmethod
    def from_returncode(cls, returncode):
        """
        Translate a subprocess return code into a result.

        Negative return codes mean the process was terminated by a signal.
        """
        if returncode >= 0:
            return cls(exit_code=returncode)
        try:
            sig = signal.Signals(-returncode)
        except ValueError:
            sig = -returncode
        return cls(exit_code=None, terminating_signal=sig)

    def describe(self):
        sig = self.terminating_signal
        if sig is not None:
            name = sig.name if isinstance(sig, signal.Signals) else sig
            return f"terminated by signal {name}"
        return f"exit code {self.exit_code}"


def format_command(cmd):
    """Render a command list as a single line for logs"""
    try:
        return ' '.join(str(c) for c in cmd)
    except UnicodeEncodeError:
        # If there are encoding issues, use repr() to show the command safely
        return ' '.join(repr(c) for c in cmd)


def run_command(cmd, logfile, env=None):
    """
    Execute a command and log output to a file.

    Args:
        cmd: Command and arguments as a list
        logfile: Path to log file for output
        env: Optional environment variables dict

    Returns:
        CommandResult for the finished process
    """
    with open(logfile, "a", encoding="utf-8", errors="replace") as f:
        f.write(f"\n$ {format_command(cmd)}\n")
        f.flush()
        result = subprocess.run(cmd, stdout=f, stderr=f, check=False, env=env)
        outcome = CommandResult.from_returncode(result.returncode)
        f.write(f"[{outcome.describe()}]\n")
        f.flush()
        return outcome


def run_pipeline(producer, consumer, logfile, env=None):
    """
    Execute `producer | consumer`, logging stderr of both and stdout of the consumer.

    Returns:
        Tuple of (producer CommandResult, consumer CommandResult)
    """
    with open(logfile, "a", encoding="utf-8", errors="replace") as f:
        f.write(f"\n$ {format_command(producer)} | {format_command(consumer)}\n")
        f.flush()
        first = subprocess.Popen(producer, stdout=subprocess.PIPE, stderr=f, env=env)
        try:
            second = subprocess.Popen(consumer, stdin=first.stdout, stdout=f, stderr=f, env=env)
        except OSError:
            first.kill()
            first.wait()
            raise
        finally:
            # Let the producer see SIGPIPE if the consumer exits early
            first.stdout.close()
        second.wait()
        first.wait()
        outcomes = (
            CommandResult.from_returncode(first.returncode),
            CommandResult.from_returncode(second.returncode),
        )
        f.write(f"[{outcomes[0].describe()} | {outcomes[1].describe()}]\n")
        f.flush()
        return outcomes
