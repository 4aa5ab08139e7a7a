from __future__ import annotations

from typing import TYPE_CHECKING

from strawberry.dataloader import DataLoader

if TYPE_CHECKING:
    from ..launches.models import Launch
    from ..upstream.launch_api import LaunchAPI


def make_launch_loader(launch_api: LaunchAPI) -> DataLoader[str, Launch | None]:
    """Batch load launches by id; unknown ids load as None."""

    async def load_launches(keys: list[str]) -> list[Launch | None]:
        launches = await launch_api.get_launches_by_ids(keys)
        launches_map = {launch.id: launch for launch in launches}
        return [launches_map.get(key) for key in keys]

    return DataLoader(load_fn=load_launches)


class Loaders:
    def __init__(self, launch_api: LaunchAPI):
        self.launch_loader = make_launch_loader(launch_api)
