"""Allow `python -m seatmap`."""

from seatmap.entrypoints import main

if __name__ == "__main__":
    main()
