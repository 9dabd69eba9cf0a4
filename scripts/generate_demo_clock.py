"""Generate demo clock SVGs for a few interesting times."""

from datetime import time
from pathlib import Path

from wedge_clock.clock.renderer import ClockRenderer

# One sweep without wrapping, one wrapping past 12 and one nearly empty wedge
DEMO_TIMES = {
    "quarter_to_one": time(12, 45, 0),
    "ten_to_twelve": time(11, 50, 0),
    "ten_past_ten": time(10, 10, 30),
    "three_sixteen": time(3, 16, 30),
}

output_dir = Path("/tmp/wedge_clock_demo")
output_dir.mkdir(parents=True, exist_ok=True)

for size in ((400, 400), (480, 320)):
    renderer = ClockRenderer(*size)
    for name, moment in DEMO_TIMES.items():
        output_path = output_dir / f"{name}_{size[0]}x{size[1]}.svg"
        output_path.write_text(renderer.render(moment))
        print(f"Generated demo clock at {output_path}")
