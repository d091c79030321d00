"""Desktop window for looking up addresses and building a flight plan."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterator, Sequence

from fplhelp.core import GeocodingError, Point, convert_coordinates, get_coordinates, url_from

_COORDINATES_LENGTH = 11


class TripPlanner:
    """The ordered list of destinations of a planned flight."""

    def __init__(self) -> None:
        self.entries: list[str] = []

    def __iter__(self) -> Iterator[str]:
        return iter(list(self.entries))

    def __len__(self) -> int:
        return len(self.entries)

    def add(self, point: Point, address: str) -> str:
        """Append a destination and return its entry text."""
        entry = f"{convert_coordinates(point)} {address}"
        self.entries.append(entry)
        print(f"Add {entry} to list of destinations")
        return entry

    def remove(self, entry: str) -> None:
        """Remove the first destination equal to ``entry``."""
        self.entries.remove(entry)

    def trip_text(self) -> str:
        """Coordinates of every destination, each followed by a space."""
        return "".join(f"{self.coordinates_of(entry)} " for entry in self.entries)

    @staticmethod
    def coordinates_of(entry: str) -> str:
        """The coordinate part of an entry."""
        return entry[:_COORDINATES_LENGTH]

    def is_empty(self) -> bool:
        return not self.entries


class FPLHelpApp:
    """State and actions of the window, with a Tk front end."""

    def __init__(self, clipboard: Callable[[str], None] | None = None) -> None:
        self.address = ""
        self.coordinates: list[Point] = []
        self.error = ""
        self.planner = TripPlanner()
        self.clipboard_text = ""
        self._clipboard = clipboard

    def convert(self) -> list[Point]:
        """Geocode the current address into candidate points."""
        try:
            self.coordinates = get_coordinates(self.address)
        except GeocodingError as err:
            print(f"Error when geocoding: {err}", file=sys.stderr)
            self.error = f"error when geocoding: {err}"
            self.coordinates = []
        return self.coordinates

    def copy_to_clipboard(self, text: str) -> None:
        self.clipboard_text = text
        if self._clipboard is not None:
            self._clipboard(text)

    def run(self) -> None:
        """Open the window and run until it is closed."""
        import tkinter as tk

        root = tk.Tk()
        root.title("FPL Help")

        if self._clipboard is None:
            def tk_clipboard(text: str) -> None:
                root.clipboard_clear()
                root.clipboard_append(text)

            self._clipboard = tk_clipboard

        address_var = tk.StringVar(value=self.address)
        error_var = tk.StringVar(value=self.error)

        main = tk.Frame(root, padx=8, pady=8)
        main.pack(fill=tk.BOTH, expand=True)
        tk.Label(main, text="Add an address", font=("TkDefaultFont", 14, "bold")).pack(anchor="w")

        search = tk.Frame(main)
        search.pack(fill=tk.X)
        tk.Entry(search, textvariable=address_var).pack(side=tk.LEFT, fill=tk.X, expand=True)

        results = tk.Frame(main)
        plan_frame = tk.Frame(main)
        trip_frame = tk.Frame(root, padx=8, pady=8)

        def refresh() -> None:
            error_var.set(self.error)
            for frame in (results, plan_frame, trip_frame):
                for child in frame.winfo_children():
                    child.destroy()

            for point in self.coordinates:
                row = tk.Frame(results)
                row.pack(fill=tk.X)
                converted = convert_coordinates(point)
                tk.Label(row, text=converted).pack(side=tk.LEFT)
                tk.Button(row, text="Copy", command=lambda c=converted: copy_result(c)).pack(side=tk.RIGHT)
                tk.Button(row, text="Add", command=lambda p=point: add(p)).pack(side=tk.RIGHT)
                link = tk.Entry(row, width=len(url_from(point)))
                link.insert(0, url_from(point))
                link.configure(state="readonly")
                link.pack(side=tk.RIGHT)
                tk.Label(row, text="Verify coordinates:").pack(side=tk.RIGHT)

            if not self.planner.is_empty():
                tk.Label(
                    plan_frame, text="Your planned flight", font=("TkDefaultFont", 14, "bold")
                ).pack(anchor="w", pady=(12, 0))
            for entry in self.planner:
                row = tk.Frame(plan_frame)
                row.pack(fill=tk.X)
                tk.Label(row, text=entry).pack(side=tk.LEFT)
                tk.Button(row, text="Remove", command=lambda e=entry: remove(e)).pack(side=tk.RIGHT)
                tk.Button(
                    row,
                    text="Copy coordinates",
                    command=lambda e=entry: self.copy_to_clipboard(self.planner.coordinates_of(e)),
                ).pack(side=tk.RIGHT)
                tk.Button(
                    row, text="Copy all", command=lambda e=entry: self.copy_to_clipboard(e)
                ).pack(side=tk.RIGHT)

            text = self.planner.trip_text()
            if text:
                trip_frame.pack(side=tk.BOTTOM, fill=tk.X)
                box = tk.Text(trip_frame, height=2)
                box.insert("1.0", text)
                box.pack(fill=tk.X)
                tk.Button(
                    trip_frame,
                    text="Copy complete trip",
                    command=lambda: self.copy_to_clipboard(box.get("1.0", "end-1c")),
                ).pack(anchor="e")
            else:
                trip_frame.pack_forget()

        def on_convert() -> None:
            self.address = address_var.get()
            self.convert()
            refresh()

        def copy_result(converted: str) -> None:
            self.copy_to_clipboard(converted)
            print(f"copy {converted} to clipboard")

        def add(point: Point) -> None:
            self.address = address_var.get()
            self.planner.add(point, self.address)
            refresh()

        def remove(entry: str) -> None:
            self.planner.remove(entry)
            refresh()

        tk.Button(search, text="Convert", command=on_convert).pack(side=tk.LEFT)
        tk.Label(main, textvariable=error_var, fg="red").pack(anchor="w")
        results.pack(fill=tk.X)
        plan_frame.pack(fill=tk.BOTH, expand=True)

        refresh()
        root.mainloop()


def main(argv: Sequence[str] | None = None) -> int:
    """Start the window."""
    FPLHelpApp().run()
    return 0


if __name__ == "__main__":
    sys.exit(main())