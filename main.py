"""
main.py — Bootstrap

1. Load tuning
2. Build the house layout (fixed for the whole process)
3. Create the app
4. Run the house scene
"""

import sys
from core import tuning
from core.app import App
from core.constants import (
    WINDOW_W, WINDOW_H, WINDOW_TITLE, FPS, MAX_DT,
    HOUSE_MARGIN, ROOM_COUNT, WALL_THICKNESS,
)
from core.layout import LayoutError, build_layout, house_bounds
from scenes.house_scene import HouseScene


def main():
    tuning.load()

    width = int(tuning.get("window", "width", WINDOW_W))
    height = int(tuning.get("window", "height", WINDOW_H))

    try:
        layout = build_layout(
            house_bounds(width, height, tuning.get("house", "margin", HOUSE_MARGIN)),
            room_count=int(tuning.get("house", "room_count", ROOM_COUNT)),
            wall_thickness=tuning.get("house", "wall_thickness", WALL_THICKNESS),
        )
    except LayoutError as exc:
        print(f"[MAIN] Bad house layout in tuning: {exc}")
        sys.exit(1)

    try:
        scene = HouseScene(layout)
    except ValueError as exc:
        print(f"[MAIN] Bad session settings in tuning: {exc}")
        sys.exit(1)

    print(f"[MAIN] House {layout.bounds.w:.0f}x{layout.bounds.h:.0f}: "
          f"{layout.room_count} rooms, {len(layout.walls)} walls")

    app = App(title=tuning.get("window", "title", WINDOW_TITLE),
              width=width, height=height,
              fps=int(tuning.get("window", "fps", FPS)),
              max_dt=float(tuning.get("loop", "max_dt", MAX_DT)))
    app.run(scene)


if __name__ == "__main__":
    main()
