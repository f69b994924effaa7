#!/usr/bin/env python3
"""
Session Export Script

Exports a stored trading session to CSV files for offline analysis.
Output: <session>_trades.csv (newest first) and <session>_positions.csv
(positions valued at the bundled mock market prices).
"""

import argparse
import asyncio
import sys
from pathlib import Path

from loguru import logger

from tradedesk.core.exceptions import StorageError, TradingException
from tradedesk.core.models import TradingSession
from tradedesk.core.utils.log_setup import configure_logging
from tradedesk.infrastructure.prices import StaticPriceSource
from tradedesk.infrastructure.storage import JsonFileSessionStore


class SessionExporter:
    """Writes a stored session's trade log and valued positions to CSV."""

    def __init__(self, session_dir: str = "data/sessions", output_dir: str = "data/exports"):
        self.store = JsonFileSessionStore(session_dir)
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        self.price_source = StaticPriceSource()

    def export(self, session_id: str) -> dict[str, str]:
        """
        Export one session.

        Args:
            session_id: Id of the stored session

        Returns:
            Dict mapping export kind to output file path
        """
        if self.store.load(session_id) is None:
            raise StorageError(session_id, "no stored session")
        session = TradingSession.load(session_id, self.store)

        trades_file = self.output_dir / f"{session_id}_trades.csv"
        session.trade_log.to_frame().to_csv(trades_file, index=False)
        logger.info(f"Wrote {len(session.trade_log)} trades to {trades_file}")

        commodities = [position.commodity for position in session.positions]
        prices = asyncio.run(self.price_source.get_prices(commodities))
        positions_file = self.output_dir / f"{session_id}_positions.csv"
        session.metrics().to_frame(prices).to_csv(positions_file, index=False)
        logger.info(f"Wrote {len(commodities)} positions to {positions_file}")

        return {"trades": str(trades_file), "positions": str(positions_file)}


def main():
    parser = argparse.ArgumentParser(
        description="Export stored trading sessions to CSV",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python export_session.py --session default
  python export_session.py --all --session-dir data/sessions --output-dir data/exports
        """,
    )

    parser.add_argument("--session", type=str, help="Session id to export")
    parser.add_argument("--all", action="store_true", help="Export every stored session")
    parser.add_argument(
        "--session-dir",
        type=str,
        default="data/sessions",
        help="Directory containing session files (default: data/sessions)",
    )
    parser.add_argument(
        "--output-dir",
        type=str,
        default="data/exports",
        help="Output directory for CSV files (default: data/exports)",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")

    args = parser.parse_args()

    configure_logging("DEBUG" if args.debug else "INFO")

    if not args.session and not args.all:
        parser.error("either --session or --all is required")

    exporter = SessionExporter(args.session_dir, args.output_dir)
    session_ids = exporter.store.session_ids() if args.all else [args.session]

    try:
        for session_id in session_ids:
            exporter.export(session_id)
        logger.success(f"Exported {len(session_ids)} session(s) to {args.output_dir}")
        return 0

    except TradingException as e:
        logger.error(f"Export failed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
