"""Job orchestration over many CUE sheets"""
import os
import time
import uuid
import threading
import traceback
from concurrent.futures import ThreadPoolExecutor, as_completed

from .. import __version__
from ..utils.helpers import safe_print
from .cue_parser import load_cue_sheet
from .models import CueSheetError
from .track_plan import album_directory, build_track_plans
from .file_finder import find_album_cover
from .audio_processor import encode_track, apply_gain


def make_logger(logfile, run_id):
    """Timestamped, thread-safe logger writing to the console and to `logfile`"""
    log_lock = threading.Lock()

    def log(msg):
        timestamp = time.strftime("%Y-%m-%d %H:%M:%S")
        formatted_msg = f"[{timestamp}] [{run_id}] {msg}"
        with log_lock:
            safe_print(formatted_msg)
            with open(logfile, "a", encoding="utf-8", errors="replace") as f:
                f.write(formatted_msg + "\n")
                f.flush()

    return log


def _describe_plan(plan):
    window = plan.window
    start = "-" if window.start is None else f"{window.start:.3f}s"
    duration = "to end" if window.duration is None else f"{window.duration:.3f}s"
    tags = ", ".join(f"{frame}={value}" for frame, value in plan.tags.items())
    return (f"{plan.label} '{plan.output_name}' from {plan.source} "
            f"[start {start}, {duration}] skip={plan.skip} artwork={plan.artwork} {{{tags}}}")


def _resolve_artwork(plan, fallback_cover, log, log_prefix):
    if plan.artwork is None:
        return fallback_cover
    if os.path.isfile(plan.artwork):
        return plan.artwork
    log(f"{log_prefix} ⚠️ Artwork not found, ignoring: {plan.artwork}")
    return None


def convert_sheet(cue_path, config, log, logfile, log_prefix=""):
    """
    Convert every track of one CUE sheet to MP3.

    Args:
        cue_path: Path to the CUE sheet
        config: ConverterConfig
        log: Function to call for logging messages
        logfile: Path to the log file
        log_prefix: Prefix for log messages

    Returns:
        Dictionary with status and details
    """
    try:
        sheet = load_cue_sheet(cue_path)
    except CueSheetError as e:
        log(f"{log_prefix} ❌ Malformed cue sheet {cue_path}: {e}")
        return {"status": "error", "message": f"malformed cue sheet: {e}", "cue": cue_path}

    if sheet is None:
        log(f"{log_prefix} ❌ Cue sheet not found: {cue_path}")
        return {"status": "error", "message": "not found", "cue": cue_path}

    sheet_dir = os.path.dirname(os.path.abspath(cue_path))
    output_dir = os.path.join(config.destination, album_directory(sheet))
    log(f"{log_prefix} 📄 {os.path.basename(cue_path)}: {len(sheet.files)} file(s), "
        f"{sheet.total_tracks} track(s) → {output_dir}")

    if not config.dry_run:
        os.makedirs(output_dir, exist_ok=True)

    encoded_by = f"cue2mp3 {__version__}"
    plans = list(build_track_plans(sheet, sheet_dir, encoded_by, config.encoder_settings))

    fallback_cover = None
    if any(plan.artwork is None and not plan.skip for plan in plans):
        fallback_cover = find_album_cover(sheet_dir, lambda msg: log(f"{log_prefix} {msg}"))

    results = []
    for plan in plans:
        if config.debug:
            log(f"{log_prefix} 🐛 {_describe_plan(plan)}")
        if plan.skip:
            log(f"{log_prefix} ⏭️ Skipping {plan.label} {plan.output_name}")
            continue
        artwork = _resolve_artwork(plan, fallback_cover, log, log_prefix)
        results.append(encode_track(
            plan, sheet_dir, output_dir, config, log, logfile, artwork, log_prefix
        ))

    failed = [r for r in results if r["status"] != "success"]
    encoded = [r["output"] for r in results if r["status"] == "success"]
    gain_result = apply_gain(encoded, config, log, logfile, log_prefix)

    log(f"{log_prefix} 📊 {len(encoded)} encoded, {len(failed)} failed")
    if failed:
        return {"status": "error", "message": f"{len(failed)} track(s) failed",
                "cue": cue_path, "details": results}
    if gain_result["status"] != "success":
        return dict(gain_result, cue=cue_path, details=results)
    return {"status": "success", "cue": cue_path, "details": results}


def convert_all(cue_paths, config, run_id=None):
    """
    Convert a batch of CUE sheets. One failing sheet never stops the others.

    Args:
        cue_paths: List of CUE sheet paths
        config: ConverterConfig
        run_id: Identifier used in log lines and for the log file name

    Returns:
        Dictionary with overall status and per-sheet details
    """
    if run_id is None:
        run_id = uuid.uuid4().hex[:8]
    os.makedirs(config.log_dir, exist_ok=True)
    logfile = os.path.join(config.log_dir, f"{run_id}.log")
    log = make_logger(logfile, run_id)

    if not cue_paths:
        log("❌ No CUE sheets to process.")
        return {"status": "error", "message": "no cue sheets found", "log": logfile}

    log(f"🚀 Converting {len(cue_paths)} CUE sheet(s) into {config.destination}"
        f"{' (dry run)' if config.dry_run else ''}")

    workers = min(config.threads, len(cue_paths))
    all_results = [None] * len(cue_paths)

    with ThreadPoolExecutor(max_workers=workers) as executor:
        futures = {
            executor.submit(
                convert_sheet, cue_path, config, log, logfile, f"[Sheet {idx}/{len(cue_paths)}]"
            ): idx
            for idx, cue_path in enumerate(cue_paths, 1)
        }
        for future in as_completed(futures):
            idx = futures[future]
            try:
                all_results[idx - 1] = future.result()
            except Exception as e:
                log(f"💥 Exception while converting {cue_paths[idx - 1]}: {str(e)}")
                log(f"Stack trace:\n{traceback.format_exc()}")
                all_results[idx - 1] = {"status": "error", "message": str(e),
                                        "cue": cue_paths[idx - 1]}

    failed_count = sum(1 for r in all_results if r["status"] != "success")
    success_count = len(all_results) - failed_count
    log(f"📊 Overall summary: {success_count} successful, {failed_count} failed "
        f"out of {len(cue_paths)} sheet(s)")

    if failed_count == len(all_results):
        return {"status": "error", "message": f"all {len(cue_paths)} sheet(s) failed",
                "log": logfile, "details": all_results}
    elif failed_count > 0:
        return {"status": "partial", "message": f"{success_count} succeeded, {failed_count} failed",
                "log": logfile, "details": all_results}
    log("✅ All sheets converted successfully!")
    return {"status": "success", "log": logfile, "details": all_results}
