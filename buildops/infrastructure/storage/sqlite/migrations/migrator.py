"""
Versioned schema migrations for the BuildOps database.

Migrations are ``vNNN_<name>.sql`` scripts in this package. Each one runs
in its own transaction together with its ``schema_migrations`` record, so
a failed script leaves no partial schema behind.

``verify_schema_integrity`` checks the guarantees the procurement
workflow leans on: the unique ledger index per purchase order, the
quantity/amount CHECK constraints, and that stored stock statuses and
order totals still agree with their inputs.
"""

import asyncio
import hashlib
import re
import time
from dataclasses import dataclass
from pathlib import Path

import aiosqlite

from buildops.config import get_logger, get_settings
from buildops.core.entities.inventory import LOW_STOCK_THRESHOLD

logger = get_logger(__name__)

MIGRATIONS_DIR = Path(__file__).parent
MIGRATION_FILENAME = re.compile(r"^v(\d{3})_(\w+)\.sql$")

REQUIRED_TABLES = (
    "schema_migrations",
    "inventory_items",
    "purchase_orders",
    "accounts",
    "financial_transactions",
    "activity_log",
)

# index name -> (table, must be unique)
REQUIRED_INDEXES: dict[str, tuple[str, bool]] = {
    "idx_tx_purchase_order": ("financial_transactions", True),
    "idx_po_status": ("purchase_orders", False),
    "idx_inventory_status": ("inventory_items", False),
}

# table -> CHECK clauses its CREATE statement must contain
REQUIRED_CHECKS: dict[str, tuple[str, ...]] = {
    "inventory_items": ("CHECK(quantity >= 0)",),
    "purchase_orders": ("CHECK(quantity > 0)", "CHECK(unit_cost >= 0)"),
    "financial_transactions": ("CHECK(amount > 0)",),
}


@dataclass(frozen=True)
class MigrationInfo:
    """A migration script on disk."""

    version: str
    name: str
    path: Path
    checksum: str

    @classmethod
    def from_file(cls, path: Path) -> "MigrationInfo":
        match = MIGRATION_FILENAME.match(path.name)
        if not match:
            raise ValueError(f"Invalid migration filename: {path.name}")
        digest = hashlib.sha256(path.read_bytes()).hexdigest()
        return cls(
            version=match.group(1),
            name=match.group(2),
            path=path,
            checksum=digest[:16],
        )


@dataclass
class MigrationResult:
    """Outcome of applying one migration."""

    version: str
    name: str
    success: bool
    execution_time_ms: int
    error: str | None = None


def discover_migrations() -> list[MigrationInfo]:
    """Migration scripts bundled with the package, oldest first."""
    migrations = []
    for path in sorted(MIGRATIONS_DIR.glob("v*.sql")):
        try:
            migrations.append(MigrationInfo.from_file(path))
        except ValueError as e:
            logger.warning("migration_file_skipped", path=str(path), error=str(e))
    return migrations


async def get_applied_migrations(conn: aiosqlite.Connection) -> dict[str, str]:
    """Applied versions mapped to the checksum they were applied with."""
    try:
        cursor = await conn.execute("SELECT version, checksum FROM schema_migrations")
    except aiosqlite.OperationalError:
        # Fresh database: nothing applied yet
        return {}
    return {row[0]: row[1] for row in await cursor.fetchall()}


async def get_current_version(conn: aiosqlite.Connection) -> str | None:
    applied = await get_applied_migrations(conn)
    return max(applied) if applied else None


async def apply_migration(
    conn: aiosqlite.Connection,
    migration: MigrationInfo,
) -> MigrationResult:
    """Run one script and record it, atomically."""
    logger.info("migration_applying", version=migration.version, name=migration.name)
    started = time.monotonic()

    try:
        # executescript commits anything pending; the explicit BEGIN keeps
        # the script and its record in one transaction.
        await conn.executescript("BEGIN;\n" + migration.path.read_text(encoding="utf-8"))
        elapsed_ms = int((time.monotonic() - started) * 1000)
        await conn.execute(
            """
            INSERT INTO schema_migrations (version, name, checksum, execution_time_ms)
            VALUES (?, ?, ?, ?)
            """,
            (migration.version, migration.name, migration.checksum, elapsed_ms),
        )
        await conn.commit()
    except aiosqlite.Error as e:
        await conn.rollback()
        logger.error("migration_failed", version=migration.version, error=str(e))
        return MigrationResult(
            version=migration.version,
            name=migration.name,
            success=False,
            execution_time_ms=int((time.monotonic() - started) * 1000),
            error=str(e),
        )

    logger.info("migration_applied", version=migration.version, execution_time_ms=elapsed_ms)
    return MigrationResult(
        version=migration.version,
        name=migration.name,
        success=True,
        execution_time_ms=elapsed_ms,
    )


async def initialize_database(db_path: Path | None = None) -> list[MigrationResult]:
    """
    Apply every pending migration in order.

    Stops at the first failure. Already-applied scripts whose content has
    changed are reported and left alone.

    Returns:
        Results for the migrations attempted in this run
    """
    db_path = db_path or get_settings().storage.db_path
    db_path.parent.mkdir(parents=True, exist_ok=True)

    results: list[MigrationResult] = []
    async with aiosqlite.connect(db_path) as conn:
        await conn.execute("PRAGMA journal_mode=WAL")
        await conn.execute("PRAGMA foreign_keys=ON")

        applied = await get_applied_migrations(conn)
        for migration in discover_migrations():
            if migration.version in applied:
                if applied[migration.version] != migration.checksum:
                    logger.warning(
                        "migration_checksum_changed",
                        version=migration.version,
                        recorded=applied[migration.version],
                        current=migration.checksum,
                    )
                continue

            result = await apply_migration(conn, migration)
            results.append(result)
            if not result.success:
                break

    logger.info(
        "database_initialized",
        db_path=str(db_path),
        applied=[r.version for r in results if r.success],
    )
    return results


async def get_migration_status(db_path: Path | None = None) -> dict:
    """Applied, pending and modified migrations for a database file."""
    db_path = db_path or get_settings().storage.db_path
    discovered = discover_migrations()

    if not db_path.exists():
        return {
            "exists": False,
            "current_version": None,
            "applied_migrations": [],
            "pending_migrations": [m.version for m in discovered],
            "modified_migrations": [],
        }

    async with aiosqlite.connect(db_path) as conn:
        applied = await get_applied_migrations(conn)

    return {
        "exists": True,
        "current_version": max(applied) if applied else None,
        "applied_migrations": sorted(applied),
        "pending_migrations": [m.version for m in discovered if m.version not in applied],
        "modified_migrations": [
            m.version
            for m in discovered
            if m.version in applied and applied[m.version] != m.checksum
        ],
    }


def _squash(sql: str) -> str:
    return "".join(sql.split()).lower()


async def _count(conn: aiosqlite.Connection, sql: str, params: tuple = ()) -> int:
    cursor = await conn.execute(sql, params)
    row = await cursor.fetchone()
    return int(row[0])


async def verify_schema_integrity(db_path: Path | None = None) -> list[dict]:
    """
    Check schema objects and stored data against what the application expects.

    Each check is a dict with ``check``, ``status`` (PASS, FAIL or WARN)
    and details for anything that did not pass.
    """
    db_path = db_path or get_settings().storage.db_path
    checks: list[dict] = []

    async with aiosqlite.connect(db_path) as conn:
        cursor = await conn.execute("PRAGMA integrity_check")
        result = (await cursor.fetchone())[0]
        checks.append({
            "check": "integrity",
            "status": "PASS" if result == "ok" else "FAIL",
            "result": result,
        })

        cursor = await conn.execute("PRAGMA foreign_key_check")
        violations = await cursor.fetchall()
        checks.append({
            "check": "foreign_keys",
            "status": "PASS" if not violations else "FAIL",
            "violations": len(violations),
        })

        cursor = await conn.execute(
            "SELECT type, name, tbl_name, sql FROM sqlite_master WHERE type IN ('table', 'index')"
        )
        objects = {(row[0], row[1]): (row[2], row[3] or "") for row in await cursor.fetchall()}

        missing_tables = [t for t in REQUIRED_TABLES if ("table", t) not in objects]
        checks.append({
            "check": "required_tables",
            "status": "PASS" if not missing_tables else "FAIL",
            "missing": missing_tables,
        })

        bad_indexes = []
        for index, (table, unique) in REQUIRED_INDEXES.items():
            found = objects.get(("index", index))
            if found is None or found[0] != table:
                bad_indexes.append(index)
            elif unique and not _squash(found[1]).startswith("createuniqueindex"):
                bad_indexes.append(index)
        checks.append({
            "check": "required_indexes",
            "status": "PASS" if not bad_indexes else "FAIL",
            "missing": bad_indexes,
        })

        missing_checks = []
        for table, clauses in REQUIRED_CHECKS.items():
            table_sql = _squash(objects.get(("table", table), ("", ""))[1])
            missing_checks.extend(
                f"{table}: {clause}" for clause in clauses if _squash(clause) not in table_sql
            )
        checks.append({
            "check": "check_constraints",
            "status": "PASS" if not missing_checks else "FAIL",
            "missing": missing_checks,
        })

        if not missing_tables:
            checks.extend(await _verify_data(conn))

    return checks


async def _verify_data(conn: aiosqlite.Connection) -> list[dict]:
    stale_status = await _count(
        conn,
        """
        SELECT COUNT(*) FROM inventory_items
        WHERE status != CASE
            WHEN quantity <= 0 THEN 'Out of Stock'
            WHEN quantity <= ? THEN 'Low Stock'
            ELSE 'In Stock'
        END
        """,
        (LOW_STOCK_THRESHOLD,),
    )
    wrong_totals = await _count(
        conn,
        "SELECT COUNT(*) FROM purchase_orders WHERE ABS(total_cost - quantity * unit_cost) > 1e-6",
    )
    unbooked = await _count(
        conn,
        """
        SELECT COUNT(*) FROM purchase_orders po
        WHERE po.status IN ('Ordered', 'Received')
          AND NOT EXISTS (
              SELECT 1 FROM financial_transactions ft WHERE ft.purchase_order_id = po.id
          )
        """,
    )
    return [
        {
            "check": "stock_status_derived",
            "status": "PASS" if not stale_status else "FAIL",
            "rows": stale_status,
        },
        {
            "check": "order_totals",
            "status": "PASS" if not wrong_totals else "FAIL",
            "rows": wrong_totals,
        },
        {
            # Orders booked before the ledger existed; reported, not fatal
            "check": "ordered_without_expense",
            "status": "PASS" if not unbooked else "WARN",
            "rows": unbooked,
        },
    ]


def main() -> None:
    """CLI entry point: apply migrations, or report status / verify."""
    import argparse

    parser = argparse.ArgumentParser(description="BuildOps database migrations")
    parser.add_argument("--db-path", type=Path, help="Database path (default from settings)")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--status", action="store_true", help="Show migration status")
    mode.add_argument("--verify", action="store_true", help="Verify schema and data")
    args = parser.parse_args()

    async def run() -> int:
        if args.status:
            status = await get_migration_status(args.db_path)
            print(f"Database exists:    {status['exists']}")
            print(f"Current version:    {status['current_version'] or '-'}")
            print(f"Pending migrations: {', '.join(status['pending_migrations']) or '-'}")
            if status["modified_migrations"]:
                print(f"Modified since applied: {', '.join(status['modified_migrations'])}")
            return 0

        if args.verify:
            checks = await verify_schema_integrity(args.db_path)
            for check in checks:
                print(f"[{check['status']}] {check['check']}")
                if check["status"] != "PASS":
                    for key, value in check.items():
                        if key not in ("check", "status"):
                            print(f"       {key}: {value}")
            return 1 if any(c["status"] == "FAIL" for c in checks) else 0

        results = await initialize_database(args.db_path)
        if not results:
            print("Schema is up to date.")
        for result in results:
            outcome = "OK" if result.success else "FAILED"
            print(f"[{outcome}] v{result.version} {result.name} ({result.execution_time_ms}ms)")
            if result.error:
                print(f"       error: {result.error}")
        return 0 if all(r.success for r in results) else 1

    raise SystemExit(asyncio.run(run()))


if __name__ == "__main__":
    main()
