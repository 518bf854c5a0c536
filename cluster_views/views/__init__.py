from .parcoords_view import ParcoordsView
from .scatter_view import ScatterView

VIEW_KINDS = {
    ParcoordsView.kind: ParcoordsView,
    ScatterView.kind: ScatterView,
}

__all__ = ["ParcoordsView", "ScatterView", "VIEW_KINDS"]
