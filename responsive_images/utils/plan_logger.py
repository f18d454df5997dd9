"""
Debug logger for breakpoint plans.

Supports configurable log levels (NONE, INFO, DEBUG, TRACE) and dual output:
- Console: Human-readable formatted output
- File: JSON Lines format for parsing and analysis
"""

import json
import os
import uuid
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import load_dotenv

from responsive_images.models import ImagePlan


class LogLevel(Enum):
    """Logging levels for plan debug output."""

    NONE = 0
    INFO = 1
    DEBUG = 2
    TRACE = 3


class PlanLogger:
    """Centralized logger for breakpoint plans with configurable levels."""

    _instance: Optional["PlanLogger"] = None

    def __new__(cls):
        """Singleton pattern implementation."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        """Initialize the logger with configuration from environment."""
        if self._initialized:
            return

        load_dotenv()

        level_str = os.getenv("RESPONSIVE_DEBUG_LEVEL", "NONE").upper()
        try:
            self.level = LogLevel[level_str]
        except KeyError:
            self.level = LogLevel.NONE

        self.log_to_file = os.getenv("RESPONSIVE_LOG_TO_FILE", "true").lower() == "true"
        self.log_dir = Path(os.getenv("RESPONSIVE_LOG_DIR", "outputs"))

        self._initialized = True

    @classmethod
    def reset(cls):
        """Drop the singleton so the next instance re-reads the environment."""
        cls._instance = None

    def should_log(self, min_level: LogLevel) -> bool:
        """Check if we should log at the given level."""
        return self.level.value >= min_level.value

    def _format_timestamp(self) -> str:
        """Get ISO8601 formatted timestamp."""
        return datetime.now().isoformat()

    def _format_console_info(self, plan: ImagePlan, src: str) -> str:
        parts = [
            f"[{plan.layout.value}]",
            f"width={plan.width}",
            f"original={plan.original_width}",
            f"{len(plan.widths)} widths",
        ]
        if src:
            parts.append(src)
        return " | ".join(parts)

    def _format_console_debug(self, plan: ImagePlan) -> str:
        lines = [
            f"  Widths: {', '.join(str(w) for w in plan.widths) or '(none)'}",
            f"  Sizes: {plan.sizes if plan.sizes is not None else '(none)'}",
        ]
        return "\n".join(lines)

    def _format_console_trace(self, plan: ImagePlan, breakpoints: Optional[list]) -> str:
        lines = [f"  Breakpoints: {breakpoints}"]
        lines.append("  Srcset:")
        for entry in plan.srcset.split(", ") if plan.srcset else []:
            lines.append(f"    {entry}")
        return "\n".join(lines)

    def _write_to_file(self, log_entry: Dict[str, Any]):
        """Write log entry to JSON Lines file."""
        if not self.log_to_file:
            return

        log_file = self.log_dir / "logs" / "plans.jsonl"
        log_file.parent.mkdir(parents=True, exist_ok=True)

        with open(log_file, "a", encoding="utf-8") as f:
            f.write(json.dumps(log_entry, ensure_ascii=False) + "\n")

    def log_plan(
        self,
        plan: ImagePlan,
        src: str = "",
        breakpoints: Optional[list] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> str:
        """
        Log a computed plan.

        Returns:
            Plan ID (UUID string), or "" when logging is disabled.
        """
        if not self.should_log(LogLevel.INFO):
            return ""

        plan_id = str(uuid.uuid4())
        timestamp = self._format_timestamp()

        print(f"[{timestamp}] 📐 Plan: {self._format_console_info(plan, src)}")
        if not plan.is_renderable():
            print(f"[{timestamp}] ⚠️  No renderable width for {src or 'image'}")

        if self.should_log(LogLevel.DEBUG):
            print(self._format_console_debug(plan))

        if self.should_log(LogLevel.TRACE):
            print(self._format_console_trace(plan, breakpoints))

        if not self.should_log(LogLevel.DEBUG):
            return plan_id

        log_entry = {
            "timestamp": timestamp,
            "level": self.level.name,
            "plan_id": plan_id,
            "src": src,
            "layout": plan.layout.value,
            "width": plan.width,
            "original_width": plan.original_width,
            "widths": plan.widths,
            "sizes": plan.sizes,
            "srcset": plan.srcset if self.level == LogLevel.TRACE else None,
            "breakpoints": list(breakpoints) if breakpoints and self.level == LogLevel.TRACE else None,
            "metadata": metadata or {},
        }
        self._write_to_file(log_entry)

        return plan_id


def get_logger() -> PlanLogger:
    """Get the singleton logger instance."""
    return PlanLogger()
