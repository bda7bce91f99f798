"""Demo: play every campaign level with its reference solution and track progress."""

from botcommander.api import dump_grid
from botcommander.campaign import Campaign
from botcommander.run import execute_program
from botcommander.run_types import RunConfig
from botcommander.scoring import rate_run


def main():
    campaign = Campaign()

    for level in campaign.levels:
        print("=" * 60)
        print(f"LEVEL {level.id}: {level.name}")
        print(f"  {level.description}")
        print("=" * 60)
        if not campaign.is_unlocked(level.id):
            print("  locked — previous level not completed\n")
            continue

        final, trace = execute_program(level.solution, level, RunConfig(verbose=True))
        rating = rate_run(level.solution, level, final)
        campaign.record(level.id, rating)

        print()
        print(dump_grid(level, final))
        print(f"\nRating: {rating.value} ({trace.stats.steps} steps)")
        done, total = campaign.progress
        print(f"MISSION PROGRESS: {done} / {total}")
        print(f"Next: level {campaign.next_level_id(level.id)}\n")


if __name__ == "__main__":
    main()
