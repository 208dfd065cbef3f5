"""
Example: Did the basketball go into the basket?

Runs the default free-throw-area shot, prints the initial data and the
sampled trajectory, draws it in text mode and saves plots (PNG, SVG)
and an animated GIF of the aimed shot.
"""
import sys
from pathlib import Path

# Setup path for local development (not needed if installed via pip)
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from hooplab.api.scenario import Scenario
from hooplab.visualization.plotting import animate_trajectory, plot_trajectory
from hooplab.visualization.text_display import TextDisplay


def run_example():
    print("********************************************")
    print("** Did the basketball go into the basket? **")
    print("********************************************")

    # 1. Default throw: 10 m/s at 45 deg from 1.5 m, basket at (8.0, 3.05)
    scenario = Scenario(name="basket_shot") \
        .configure_sampling("default") \
        .enable_plotting(show=False) \
        .run()

    scenario.shot.print_summary()
    print()
    print(TextDisplay().render(scenario.result))

    # 2. Same throw, aimed: solve for the speed that reaches the rim center
    aimed = Scenario(name="basket_shot_aimed") \
        .configure_sampling("fine") \
        .aim(angle_deg=52.0) \
        .run()

    print(f"Aimed shot made: {aimed.result.made} "
          f"(closest approach {aimed.result.hit.min_distance:.3f} m)")

    svg_path = Path("output") / "basket_shot_aimed.svg"
    plot_trajectory(aimed.result, save_path=svg_path)
    print(f"SVG saved to {svg_path}")

    gif_path = Path("output") / "basket_shot_aimed.gif"
    animate_trajectory(aimed.result, save_path=gif_path)
    print(f"Animation saved to {gif_path}")


if __name__ == "__main__":
    run_example()
