"""World-record history layer.

The history maps each normalized course ID to its chronological list of
:class:`~smm2wr.models.record.RecordEntry`. It is append-only: the merger
only ever adds entries and the store always rewrites the whole file.
"""

from smm2wr.history.merge import History, merge_observations
from smm2wr.history.store import HistoryStore

__all__ = ["History", "HistoryStore", "merge_observations"]
