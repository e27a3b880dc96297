"""Board selection, board init sequences and nRF52 memory layout."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


class BoardError(Exception):
    """Raised when no usable board or MCU configuration is selected."""


@dataclass(frozen=True)
class MemorySection:
    """A named linker memory region."""

    name: str
    origin: int
    length: int
    pagesize: int | None = None


# Checked in this order; the first selected feature wins.
_BOARD_PRIORITY = (
    ("nrf52dk", "nrf52dk"),
    ("dwm1001", "dwm1001"),
    ("nrf52840dk", "nrf52840dk"),
    ("nrf52840-mdk", "nrf52840-mdk"),
    ("microbit", "microbit"),
    ("microbit-v2", "microbit-v2"),
    ("nucleo-f401re", "nucleo-f401re"),
    ("lm3s6965evb", "lm3s6965evb"),
    ("rpi-pico", "rpi-pico"),
    ("rpi-pico-w", "rpi-pico"),
)

_INIT_CHAINS = {
    "dwm1001": ("dwm1001::init()", "nrf52::init()"),
    "lm3s6965evb": ("lm3s6965ev::init()",),
    "microbit": ("microbit::init()", "nrf51::init()"),
    "microbit-v2": ("microbit_v2::init()", "nrf52::init()"),
    "nrf52840-mdk": ("nrf52840-mdk::init()", "nrf52::init()"),
    "nrf52840dk": ("nrf52840dk::init()", "nrf52::init()"),
    "nrf52dk": ("nrf52dk::init()", "nrf52::init()"),
    "nucleo-f401re": ("boards::nucleo-f401re::init()",),
    "rpi-pico": ("rpi-pico::init()",),
}


def select_board(features: Iterable[str]) -> str:
    """Return the board chosen by the enabled features.

    ``rpi-pico-w`` shares the ``rpi-pico`` board.
    """
    enabled = set(features)
    for feature, board in _BOARD_PRIORITY:
        if feature in enabled:
            return board
    raise BoardError("no board feature selected")


def board_init_chain(board: str) -> tuple[str, ...]:
    """Return the init messages a board emits, outermost first."""
    try:
        return _INIT_CHAINS[board]
    except KeyError:
        raise BoardError(f"unknown board: {board}") from None


def nrf52_memory_layout(features: Iterable[str]) -> tuple[MemorySection, MemorySection]:
    """Return the RAM and FLASH sections for the selected nRF52 MCU."""
    enabled = set(features)
    if "nrf52832" in enabled:
        ram, rom = 64, 256
    elif "nrf52840" in enabled:
        ram, rom = 256, 1024
    else:
        raise BoardError("nrf52: please set MCU feature")
    return (
        MemorySection("RAM", 0x20000000, ram * 1024),
        MemorySection("FLASH", 0x0, rom * 1024, pagesize=4096),
    )