"""Audio processing logic for individual tracks and albums"""
import os

from ..utils.helpers import run_command, run_pipeline, format_command


def format_seconds(seconds):
    """Seconds as a decoder time argument, millisecond precision"""
    return f"{seconds:.3f}"


def unescape_quotes(value):
    """Undo the quote escaping applied while parsing; arguments here bypass the shell"""
    return value.replace('\\"', '"')


def build_decode_command(config, source_path, window):
    """Decoder command writing the track's window of `source_path` to stdout as WAV"""
    cmd = [config.decoder_path, "-hide_banner", "-nostdin", "-v", "error"]
    if window.start is not None:
        cmd += ["-ss", format_seconds(window.start)]
        if window.duration is not None:
            cmd += ["-t", format_seconds(window.duration)]
    cmd += ["-i", source_path, "-f", "wav", "-acodec", "pcm_s16le", "-"]
    return cmd


def build_encode_command(config, plan, output_path, artwork=None):
    """Encoder command reading WAV on stdin and writing a tagged MP3"""
    cmd = [config.encoder_path] + list(config.encoder_flags) + ["--id3v2-only"]
    for frame, value in plan.tags.items():
        if frame == "COMM":
            # lame only accepts COMM via --tv with a description; --tc writes a plain one
            cmd += ["--tc", unescape_quotes(value)]
        else:
            cmd += ["--tv", f"{frame}={unescape_quotes(value)}"]
    if artwork:
        cmd += ["--ti", artwork]
    cmd += ["-", output_path]
    return cmd


def build_gain_command(config, track_paths):
    return [config.gain_path] + list(config.gain_flags) + list(track_paths)


def encode_track(plan, sheet_dir, output_dir, config, log, logfile, artwork=None, log_prefix=""):
    """
    Decode one track's window from its source file and encode it to MP3.

    Args:
        plan: TrackPlan to execute
        sheet_dir: Directory of the CUE file; the source path is relative to it
        output_dir: Directory the MP3 is written to
        config: ConverterConfig
        log: Function to call for logging messages
        logfile: Path to the log file receiving command output
        artwork: Optional cover image path to embed
        log_prefix: Prefix for log messages

    Returns:
        Dictionary with status and details
    """
    source_path = os.path.join(sheet_dir, plan.source)
    output_path = os.path.join(output_dir, plan.output_name)
    decode_cmd = build_decode_command(config, source_path, plan.window)
    encode_cmd = build_encode_command(config, plan, output_path, artwork)

    if config.dry_run:
        log(f"{log_prefix} 📋 {format_command(decode_cmd)} | {format_command(encode_cmd)}")
        return {"status": "success", "output": output_path}

    log(f"{log_prefix} 🔄 Encoding {plan.label} → {plan.output_name} ...")
    decoded, encoded = run_pipeline(decode_cmd, encode_cmd, logfile)
    for name, outcome in ((config.decoder_path, decoded), (config.encoder_path, encoded)):
        if not outcome.succeeded:
            error_msg = f"{os.path.basename(name)} failed with {outcome.describe()}"
            log(f"{log_prefix} ❌ {plan.output_name}: {error_msg}")
            log(f"{log_prefix} 📄 Full log available at: {logfile}")
            return {"status": "error", "message": error_msg, "output": output_path,
                    "command": os.path.basename(name)}

    log(f"{log_prefix} ✅ {plan.output_name}: done")
    return {"status": "success", "output": output_path}


def apply_gain(track_paths, config, log, logfile, log_prefix=""):
    """
    Run the gain tool once over all tracks of an album.

    Returns:
        Dictionary with status and details
    """
    if not config.gain_path or not track_paths:
        return {"status": "success"}

    cmd = build_gain_command(config, track_paths)
    if config.dry_run:
        log(f"{log_prefix} 📋 {format_command(cmd)}")
        return {"status": "success"}

    log(f"{log_prefix} 🎚️ Normalizing gain over {len(track_paths)} track(s)...")
    outcome = run_command(cmd, logfile)
    if not outcome.succeeded:
        error_msg = f"{os.path.basename(config.gain_path)} failed with {outcome.describe()}"
        log(f"{log_prefix} ⚠️ {error_msg}")
        return {"status": "error", "message": error_msg, "command": "gain"}

    log(f"{log_prefix} ✅ Gain normalization completed")
    return {"status": "success"}
