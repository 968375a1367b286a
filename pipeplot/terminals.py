from __future__ import annotations

from pipeplot.serialize import quote
from pipeplot.styles import AxisScale, TerminalMode


def _with_output(terminal: str, filename: str) -> str:
    return f"{terminal}\nset output {quote(filename)}"


def png_terminal(filename: str, size: str = "800,600") -> str:
    return _with_output(f"set terminal pngcairo color enhanced size {size}", filename)


def pdf_terminal(filename: str, size: str = "16cm,12cm") -> str:
    return _with_output(f"set terminal pdfcairo color enhanced size {size}", filename)


def svg_terminal(filename: str, size: str = "800,600") -> str:
    return _with_output(f"set terminal svg enhanced mouse standalone size {size}", filename)


def dumb_terminal(
    filename: str = "",
    width: int = 80,
    height: int = 50,
    mode: TerminalMode | str = TerminalMode.MONO,
) -> str:
    if width <= 0 or height <= 0:
        raise ValueError("dumb terminal width/height must be > 0")
    terminal = f"set terminal dumb size {width},{height} {TerminalMode(mode).value}"
    if not filename:
        return terminal
    return _with_output(terminal, filename)


def animated_gif_terminal(
    filename: str,
    size: str = "800,600",
    delay_ms: int = 50,
    loop: bool = True,
) -> str:
    if delay_ms < 0:
        raise ValueError("delay_ms must be >= 0")
    # gif delays are expressed in hundredths of a second; loop 0 repeats forever.
    delay_cs = max(0, round(delay_ms / 10))
    loop_count = 0 if loop else 1
    return _with_output(
        f"set terminal gif animate delay {delay_cs} loop {loop_count} size {size}",
        filename,
    )


def logscale_command(scale: AxisScale | str) -> str:
    scale = AxisScale(scale)
    if scale is AxisScale.LOGX:
        return "set logscale x"
    if scale is AxisScale.LOGY:
        return "set logscale y"
    if scale is AxisScale.LOGXY:
        return "set logscale xy"
    return "unset logscale"


def multiplot_command(rows: int, cols: int, title: str = "") -> str:
    if rows <= 0 or cols <= 0:
        raise ValueError("multiplot rows/cols must be > 0")
    return f"set multiplot layout {rows}, {cols} title {quote(title)}"
