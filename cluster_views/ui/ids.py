from __future__ import annotations

__all__ = ["IDs", "graph_id"]


class IDs:
    class Control:
        K_INPUT = "k-input"
        PALETTE_SELECT = "palette-select"
        COLOR_TARGETS = "color-targets-checklist"
        VARIABLES_SELECT = "variables-select"
        OPTIONS_CHECKLIST = "options-checklist"
        SEED_INPUT = "seed-input"
        INIT_SELECT = "init-select"
        RUN_BTN = "run-cluster-btn"

    class Status:
        RUN_STATUS = "run-status"


def graph_id(view_id: str) -> str:
    return f"graph-{view_id}"
