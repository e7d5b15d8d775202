"""Module entrypoint for `python -m tablekit`.

Delegates to `tablekit.demo.main` to launch the demo window.
"""

from __future__ import annotations


def main():  # pragma: no cover - runtime delegation
    from tablekit import demo

    demo.main()


if __name__ == "__main__":  # pragma: no cover
    main()
