import argparse
import asyncio
import logging
import sys
from uuid import UUID

from serverforge.app.core import settings
from serverforge.app.domain.provisioning.enums import PackageCategory, Role
from serverforge.app.domain.provisioning.errors import NoProgressForPackage


async def _init_db() -> None:
    from serverforge.app.infrastructure.db.init_db import init_db

    await init_db()
    print("Tables created")


async def _show_progress(host_id: UUID, category: PackageCategory, direction: Role | None) -> int:
    from serverforge.app.application.provisioning.dto import GetPackageProgressInputDTO
    from serverforge.app.application.provisioning.use_cases.get_package_progress import GetPackageProgressUseCase
    from serverforge.app.infrastructure.db.session import SessionLocal
    from serverforge.app.infrastructure.db.uow import SqlAlchemyUnitOfWork

    async with SessionLocal() as session:
        use_case = GetPackageProgressUseCase(SqlAlchemyUnitOfWork(session))
        try:
            events = await use_case.execute(
                GetPackageProgressInputDTO(host_id=host_id, category=category, direction=direction)
            )
        except NoProgressForPackage as e:
            print(e, file=sys.stderr)
            return 1

    for e in events:
        print(f"[{e.step_index}/{e.total_steps}] {e.status:<8} {e.label}")
        if e.error:
            print(f"    {e.error}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="serverforge")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("init-db", help="create the database tables")

    progress = sub.add_parser("progress", help="show the latest run's milestones for a package")
    progress.add_argument("host_id", type=UUID)
    progress.add_argument("category", type=PackageCategory, choices=list(PackageCategory))
    progress.add_argument("--direction", type=Role, choices=list(Role), default=None)
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=settings.LOG_LEVEL)

    if args.command == "init-db":
        asyncio.run(_init_db())
        return 0
    return asyncio.run(_show_progress(args.host_id, args.category, args.direction))


if __name__ == "__main__":
    sys.exit(main())
