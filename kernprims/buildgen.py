"""Build-time generators: build info source, arch cfgs and core makefile."""

from __future__ import annotations

from pathlib import Path

BUILDINFO_FILE = "buildinfo.rs"
CORE_MAKEFILE_NAME = "Makefile.riot-rs-core"
UNKNOWN_BUILDER = "unknown"


def buildinfo_source(builder: str | None) -> str:
    """Return the generated build-info source declaring the board name."""
    board = builder if builder is not None else UNKNOWN_BUILDER
    return f"pub const BOARD: &'static str = \"{board}\";\n"


def write_buildinfo(out_dir: str | Path, builder: str | None = None) -> Path:
    """Write the build-info source into ``out_dir`` and return its path."""
    path = Path(out_dir) / BUILDINFO_FILE
    path.write_text(buildinfo_source(builder))
    return path


def arch_cfgs(target: str) -> list[str]:
    """Return the architecture cfg names that apply to a target triple."""
    cfgs = []
    if target.startswith("thumbv6m"):
        cfgs.append("armv6m")
    if target.startswith(("thumbv7m", "thumbv7em", "thumbv8m")):
        cfgs.append("armv7m")
    return cfgs


def core_makefile_snippet(gen_include_path: str | Path, include_path: str | Path) -> str:
    """Return the makefile snippet that switches the build to the core."""
    return (
        "export USE_RUST_CORE = 1\n"
        "DISABLE_MODULE += core\n"
        "USEMODULE += riot_rs_core\n"
        "PSEUDOMODULE += riot_rs_core\n"
        f"INCLUDES += -I{gen_include_path}\n"
        f"INCLUDES += -I{include_path}\n"
    )


def write_core_makefile(out_dir: str | Path, crate_dir: str | Path) -> Path:
    """Create the generated include directory and write the makefile snippet.

    Returns the path of the written makefile.
    """
    out_path = Path(out_dir)
    gen_include_path = out_path / "include"
    include_path = Path(crate_dir) / "include"
    gen_include_path.mkdir(parents=True, exist_ok=True)
    makefile = out_path / CORE_MAKEFILE_NAME
    makefile.write_text(core_makefile_snippet(gen_include_path, include_path))
    return makefile