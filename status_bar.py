import os
import time


def render_status(context, width):
    """
    context keys: status_msg, status_until, mode, file_path, shape, cursor,
                  history_depth, clipboard
    """
    text = ""
    now = time.time()
    if context.get("status_msg") and now < context.get("status_until", 0):
        text = f" {context['status_msg']}"
    else:
        mode = context.get("mode", "NAV")
        fname = context.get("file_path") or ""
        if fname:
            fname = os.path.basename(fname)
        rows, cols = context.get("shape", (0, 0))
        row, col = context.get("cursor", (0, 0))
        if rows:
            pos = f"R{row + 1}:C{col + 1}"
        else:
            pos = f"(empty):C{col + 1}"
        parts = [mode, fname, f"{rows}x{cols}", pos]
        depth = context.get("history_depth", 0)
        if depth:
            parts.append(f"undo {depth}")
        clip = context.get("clipboard")
        if clip is not None:
            preview = clip.replace("\n", " ")
            if len(preview) > 12:
                preview = preview[:11] + "…"
            parts.append(f"clip '{preview}'")
        text = " " + " | ".join(parts)

    return text.ljust(width)[:width]
