# timeline/main.py

import asyncio
import logging

from timeline.api import TimelineConfig
from timeline.service import TimelineService
from timeline.sources import build_source

# Configure logging: timestamp + level
logging.basicConfig(
    level=logging.DEBUG,
    format="%(asctime)s [%(levelname)s] %(message)s",
    datefmt="%H:%M:%S",
)


async def run():
    service = TimelineService(build_source(), TimelineConfig(width_per_day=10))
    layout = await service.layout()
    stats = await service.stats()

    print("=== Timeline Lanes ===")
    for lane in layout.lanes:
        print(f"Lane {lane.index}:")
        for block in lane.blocks:
            print(f"  {block.event.name:<36} {block.label:<16} x={block.x:.0f} width={block.width:.0f}")
    print(f"Lanes: {stats['lane_count']} (max concurrency {stats['max_concurrency']})")


def main():
    asyncio.run(run())


if __name__ == "__main__":
    main()
