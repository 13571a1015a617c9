"""Command-line entry point"""
import os
import sys
import argparse

from . import __version__
from .config import DEFAULT_LOG_DIR, config_from_args
from .core.file_finder import find_cue_files
from .core.job_orchestrator import convert_all
from .utils.helpers import safe_print


def parse_arguments(argv=None):
    """Parse command line arguments and environment variables"""
    # Read defaults from environment variables
    env_decoder = os.environ.get("CUE2MP3_DECODER", "ffmpeg")
    env_encoder = os.environ.get("CUE2MP3_ENCODER", "lame")
    env_encoder_flags = os.environ.get("CUE2MP3_ENCODER_FLAGS", "-V2 --noreplaygain")
    env_gain = os.environ.get("CUE2MP3_GAIN", "mp3gain")
    env_gain_flags = os.environ.get("CUE2MP3_GAIN_FLAGS", "-a -k -q")
    env_dest = os.environ.get("CUE2MP3_DEST", ".")
    env_threads = int(os.environ.get("CUE2MP3_THREADS", "1"))

    parser = argparse.ArgumentParser(
        prog="cue2mp3",
        description="Convert a lossless disc image + CUE sheet into tagged MP3 tracks",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s album.cue
  %(prog)s --dest ~/Music --threads 4 ~/rips
  %(prog)s --dry-run --debug album.cue

Environment Variables:
  CUE2MP3_DECODER        - Decoder executable
  CUE2MP3_ENCODER        - MP3 encoder executable
  CUE2MP3_ENCODER_FLAGS  - Encoder flags
  CUE2MP3_GAIN           - Gain tool executable (empty to disable)
  CUE2MP3_GAIN_FLAGS     - Gain tool flags
  CUE2MP3_DEST           - Destination root directory
  CUE2MP3_THREADS        - Number of sheets converted in parallel
"""
    )

    parser.add_argument(
        "inputs",
        nargs="+",
        metavar="CUE_OR_DIR",
        help="CUE sheets, or directories searched recursively for them"
    )
    parser.add_argument(
        "--decoder",
        default=env_decoder,
        help=f"Decoder executable (default: {env_decoder}, env: CUE2MP3_DECODER)"
    )
    parser.add_argument(
        "--encoder",
        default=env_encoder,
        help=f"MP3 encoder executable (default: {env_encoder}, env: CUE2MP3_ENCODER)"
    )
    parser.add_argument(
        "--encoder-flags",
        default=env_encoder_flags,
        help=f"Encoder flags (default: '{env_encoder_flags}', env: CUE2MP3_ENCODER_FLAGS)"
    )
    parser.add_argument(
        "--gain",
        default=env_gain,
        help=f"Gain tool executable, empty to disable (default: {env_gain}, env: CUE2MP3_GAIN)"
    )
    parser.add_argument(
        "--gain-flags",
        default=env_gain_flags,
        help=f"Gain tool flags (default: '{env_gain_flags}', env: CUE2MP3_GAIN_FLAGS)"
    )
    parser.add_argument(
        "-d", "--dest",
        default=env_dest,
        help=f"Destination root directory (default: {env_dest}, env: CUE2MP3_DEST)"
    )
    parser.add_argument(
        "--threads",
        type=int,
        default=env_threads,
        help=f"Sheets converted in parallel (default: {env_threads}, env: CUE2MP3_THREADS)"
    )
    parser.add_argument(
        "--log-dir",
        default=DEFAULT_LOG_DIR,
        help=f"Directory for run logs (default: {DEFAULT_LOG_DIR})"
    )
    parser.add_argument(
        "-n", "--dry-run",
        action="store_true",
        help="Print the commands without running them"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Log the resolved plan of every track"
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )

    return parser.parse_args(argv)


def main(argv=None):
    """Main entry point"""
    args = parse_arguments(argv)
    config = config_from_args(args)

    cue_paths = find_cue_files(args.inputs, safe_print)
    if not cue_paths:
        safe_print("❌ No CUE sheets found.")
        return 2

    result = convert_all(cue_paths, config)
    if result["status"] != "success":
        safe_print(f"⚠️ {result.get('message', result['status'])} (log: {result.get('log')})")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
