"""Interactive window that shows a height map as a wireframe."""

from __future__ import annotations

import sys
from typing import Any, Callable, Sequence

from wirefdf.mapfile import MapError, read_map
from wirefdf.scene import MENU, Key, Scene, setup_scene

_KEYSYMS = {
    "escape": Key.ESCAPE,
    "c": Key.CLEAR,
    "i": Key.ISOMETRIC,
    "p": Key.PARALLEL,
    "e": Key.ELEGANT,
    "v": Key.VIBRANT,
}

_BACKGROUND = "#000000"

Pixel = tuple[int, int]


def _key_code(event: Any) -> int | None:
    """Turn a key event, a key symbol or a raw code into a key code."""
    if isinstance(event, int):
        return event
    keysym = event if isinstance(event, str) else getattr(event, "keysym", "")
    return _KEYSYMS.get(str(keysym).lower())


class Viewer:
    """Keeps a scene on screen and reacts to key presses.

    The rendered frame maps window pixels to 0xRRGGBB colours; pixels that
    fall outside the window are left out. When a canvas is given, each
    redraw is also shown on it.
    """

    def __init__(
        self,
        scene: Scene,
        canvas: Any = None,
        on_close: Callable[[], Any] | None = None,
    ) -> None:
        self.scene = scene
        self.canvas = canvas
        self.on_close = on_close
        self.frame: dict[Pixel, int] = {}
        self.is_open = True
        self._image: Any = None

    def redraw(self) -> dict[Pixel, int]:
        """Render the scene anew and return the frame."""
        width, height = self.scene.map_width, self.scene.map_height
        self.frame = {
            (x, y): colour
            for x, y, colour in self.scene.pixels()
            if 0 <= x < width and 0 <= y < height
        }
        if self.canvas is not None:
            self._present()
        return self.frame

    def on_key(self, event: Any) -> bool:
        """Handle a key press; return False once the viewer has closed."""
        code = _key_code(event)
        if code is not None and not self.scene.handle_key(code):
            self.is_open = False
            if self.on_close is not None:
                self.on_close()
            return False
        self.redraw()
        return True

    def _present(self) -> None:
        import tkinter

        width, height = self.scene.map_width, self.scene.map_height
        rows = [[_BACKGROUND] * width for _ in range(height)]
        for (x, y), colour in self.frame.items():
            rows[y][x] = f"#{colour:06x}"
        image = tkinter.PhotoImage(width=width, height=height)
        image.put(" ".join("{" + " ".join(row) + "}" for row in rows))
        self._image = image
        self.canvas.delete("all")
        self.canvas.create_image(0, 0, image=image, anchor="nw")
        for x, y, colour, text in MENU:
            self.canvas.create_text(x, y, text=text, fill=f"#{colour:06x}", anchor="nw")


def main(argv: Sequence[str] | None = None) -> int:
    """Open a window showing the map file named on the command line."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print("Number of arguments are incorrect!")
        return 1
    try:
        height_map = read_map(args[0])
    except MapError as exc:
        print(exc)
        return 1
    scene = setup_scene(height_map)

    import tkinter

    root = tkinter.Tk()
    root.title("FDF")
    canvas = tkinter.Canvas(
        root,
        width=scene.map_width,
        height=scene.map_height,
        background=_BACKGROUND,
        highlightthickness=0,
    )
    canvas.pack()
    viewer = Viewer(scene, canvas, on_close=root.destroy)
    root.bind("<KeyPress>", viewer.on_key)
    viewer.redraw()
    root.mainloop()
    return 0


if __name__ == "__main__":
    sys.exit(main())