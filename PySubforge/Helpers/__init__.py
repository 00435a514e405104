import os

def GetInputPath(filepath : str|None) -> str|None:
    """
    Normalize the input file path for cross-platform compatibility.

    Returns:
        str: Normalized path preserving original extension
        None: If filepath is None
    """
    if not filepath:
        return None
    return os.path.normpath(filepath)

def GetExportFilename(basename : str|None, format_extension : str) -> str:
    """
    Generate the file name for an export, e.g. "subtitles.vtt".

    Args:
        basename: Base name for the file, with or without an extension (defaults to "subtitles")
        format_extension: Target format extension, with or without the leading '.'
    """
    target_extension = format_extension if format_extension.startswith('.') else f'.{format_extension}'
    base = os.path.splitext(os.path.basename(basename))[0] if basename else ""
    return f"{base or 'subtitles'}{target_extension}"

