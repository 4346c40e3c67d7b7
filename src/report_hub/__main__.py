from __future__ import annotations

from .cli.app import app


def main() -> None:
    """report-hub 指令入口點。"""

    app(prog_name="report-hub")


if __name__ == "__main__":
    main()
