# presentation/renderer.py
import re
import shutil
import sys

CLEAR_METHOD = "ansi"

# --- Constants for layout ---
MIN_WIDTH = 40
FOOTER_CONTROLS = "Cmd: rent [n] | free <id> | move <id> <dx> <dy> | report | q(quit)"


def get_visible_length(s: str) -> int:
    """Calculates the visible length of a string by removing ANSI escape codes."""
    return len(re.sub(r"\033\[[0-9;]*m", "", s))


def _render_header(render_data: dict, terminal_width: int) -> str:
    title_text = "--- Car Rental ---"
    fleet_stats = (
        f"Fleet: {render_data['total']} | Free: {render_data['free']}"
        f" | Rented: {render_data['busy']}"
    )
    full_title_line = f"{title_text} | {fleet_stats}"
    if get_visible_length(full_title_line) > terminal_width:
        full_title_line = full_title_line[:terminal_width]
    return full_title_line


def _render_fleet(render_data: dict) -> list[str]:
    statuses = render_data.get("car_statuses", [])
    if not statuses:
        return ["(no cars rented)"]
    return list(statuses)


def _render_footer(render_data: dict, terminal_width: int, log_lines: int) -> list[str]:
    """Renders the log panel and the command hint."""
    buffer = ["-" * terminal_width, "--- Log ---"]
    display_logs = render_data.get("logs", [])[-log_lines:] if log_lines > 0 else []
    buffer.extend(display_logs)
    buffer.append(FOOTER_CONTROLS)
    return buffer


def build_frame(render_data: dict, terminal_width: int, log_lines: int) -> list[str]:
    terminal_width = max(terminal_width, MIN_WIDTH)
    output_buffer = [_render_header(render_data, terminal_width)]
    output_buffer.extend(_render_fleet(render_data))
    output_buffer.extend(_render_footer(render_data, terminal_width, log_lines))
    return output_buffer


def display(render_data: dict, log_lines: int = 10):
    terminal_width = shutil.get_terminal_size().columns
    output_buffer = build_frame(render_data, terminal_width, log_lines)

    if CLEAR_METHOD == "ansi":
        write_buffer = ["\033[H\033[2J"]  # Move to top-left and clear
        for line in output_buffer:
            write_buffer.append(line + render_data["colors"].RESET + "\n")
        sys.stdout.write("".join(write_buffer))
    else:
        sys.stdout.write("\n".join(output_buffer) + "\n")
    sys.stdout.flush()
