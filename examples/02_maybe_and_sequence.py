from __future__ import annotations

from _infra import FakeBackend, FakeStore, User, banner, run

from kungfu import Error, Ok

from taskmonad import AbsentValueError, Maybe, TaskMonad, lift as L


async def main() -> None:
    banner("02_maybe_and_sequence: Maybe bridge + concurrent join")

    store = FakeStore(users={1: User(id=1, name="ada")})
    api = FakeBackend(name="api", delay_seconds=0.01)

    found = Maybe.from_optional(store.find(1)).to_task_monad()
    print(f"found: {(await found).name}")

    missing = Maybe.from_optional(store.find(2)).to_task_monad()
    try:
        await missing
    except AbsentValueError as exc:
        print(f"missing: {exc}")

    users = await TaskMonad.sequence([L.call(api.fetch_user, uid) for uid in (3, 4, 5)])
    print(f"sequence: {[u.id for u in await users]}")

    outcome = await TaskMonad.parallel(
        L.call(api.fetch_user, 6),
        L.call(api.fetch_user, -1),
    ).to_result()
    match outcome:
        case Ok(_):
            print("parallel: unexpected success")
        case Error(err):
            print(f"parallel failed: {err!r}")


if __name__ == "__main__":
    run(main)
