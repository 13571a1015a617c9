"""Converter configuration"""
import os
import shlex
from dataclasses import dataclass
from typing import Tuple

DEFAULT_LOG_DIR = "/tmp/cue2mp3_logs"


@dataclass(frozen=True)
class ConverterConfig:
    """Options for decoding, encoding and gain normalization of a run."""

    decoder_path: str = "ffmpeg"
    encoder_path: str = "lame"
    encoder_flags: Tuple[str, ...] = ("-V2", "--noreplaygain")
    gain_path: str = "mp3gain"
    gain_flags: Tuple[str, ...] = ("-a", "-k", "-q")
    destination: str = "."
    dry_run: bool = False
    debug: bool = False
    threads: int = 1
    log_dir: str = DEFAULT_LOG_DIR

    @property
    def encoder_settings(self):
        """Value written to the TSSE frame"""
        return " ".join([os.path.basename(self.encoder_path)] + list(self.encoder_flags))


def split_flags(value):
    """Split a flag string the way a shell would"""
    return tuple(shlex.split(value)) if value else ()


def config_from_args(args):
    """
    Build a ConverterConfig from parsed command-line arguments.

    Args:
        args: argparse Namespace from cli.parse_arguments()
    """
    return ConverterConfig(
        decoder_path=args.decoder,
        encoder_path=args.encoder,
        encoder_flags=split_flags(args.encoder_flags),
        gain_path=args.gain,
        gain_flags=split_flags(args.gain_flags),
        destination=args.dest,
        dry_run=args.dry_run,
        debug=args.debug,
        threads=max(1, args.threads),
        log_dir=args.log_dir,
    )
