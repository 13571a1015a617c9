"""File discovery and searching utilities"""
import os

IMAGE_EXTENSIONS = ('.jpg', '.jpeg', '.png', '.bmp', '.gif', '.tiff', '.tif', '.webp')


def find_cue_files(paths, log_func=None):
    """
    Expand command-line inputs into a list of CUE files.

    Files are taken as given (whatever their extension); directories are
    walked recursively for *.cue files, sorted for a stable order.

    Args:
        paths: Iterable of file or directory paths
        log_func: Optional function to call for logging messages

    Returns:
        List of CUE file paths
    """
    if log_func is None:
        log_func = lambda msg: None

    cue_files = []
    for path in paths:
        if not os.path.isdir(path):
            cue_files.append(path)
            continue

        log_func(f"📁 Scanning directory: {path}")
        for dirpath, dirnames, filenames in os.walk(path):
            dirnames.sort()
            for filename in sorted(filenames):
                if filename.lower().endswith(".cue"):
                    log_func(f"  📄 Found CUE file: {os.path.relpath(os.path.join(dirpath, filename), path)}")
                    cue_files.append(os.path.join(dirpath, filename))
    return cue_files


def find_album_cover(album_path, log_func):
    """
    Search for an album cover image next to a CUE sheet.
    Priority:
    1. Images with "front", "cover" or "folder" in the name (case insensitive)
    2. First image without "back", "side", or "inner" in the name

    Args:
        album_path: Directory containing the CUE sheet
        log_func: Function to call for logging messages

    Returns:
        Path to cover image or None
    """
    front_images = []
    other_images = []

    try:
        filenames = sorted(os.listdir(album_path))
    except OSError:
        return None

    for file in filenames:
        file_lower = file.lower()
        if not file_lower.endswith(IMAGE_EXTENSIONS):
            continue
        file_path = os.path.join(album_path, file)
        if any(word in file_lower for word in ("front", "cover", "folder")):
            front_images.append(file_path)
        elif not any(word in file_lower for word in ("back", "side", "inner")):
            other_images.append(file_path)

    if front_images:
        cover = front_images[0]
        log_func(f"🖼️ Found front cover image: {os.path.basename(cover)}")
        return cover

    if other_images:
        cover = other_images[0]
        log_func(f"🖼️ Found cover image: {os.path.basename(cover)}")
        return cover

    log_func("ℹ️ No suitable cover image found")
    return None
