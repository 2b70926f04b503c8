from __future__ import annotations

from _infra import FakeBackend, FakeStore, banner, run

from taskmonad import TaskMonad, lift as L


async def main() -> None:
    banner("01_quickstart: lift + bind + map + side effect")

    api = FakeBackend(name="api", delay_seconds=0.01)
    store = FakeStore()

    pipeline = (
        TaskMonad.unit(42)
        .bind(lambda uid: L.call(api.fetch_user, uid))
        .perform_side_effect(store.put_user)
        .map(lambda user: f"hello, {user.name}")
    )

    # Nothing has run yet.
    print(f"calls before run: {api.calls}")

    print(await pipeline)
    print(f"calls after run: {api.calls}, stored: {sorted(store.users)}")

    # Running again re-executes the whole chain.
    await pipeline.get_result()
    print(f"calls after second run: {api.calls}")


if __name__ == "__main__":
    run(main)
