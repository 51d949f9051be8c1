from typing import Dict, Tuple


class IdentityRegistry:
    """
    Maps entity labels to sequential integer ids, in first-seen order.
    Ids are never reused or renumbered.
    """

    def __init__(self):
        self._ids: Dict[str, int] = {}

    def assign(self, label: str) -> Tuple[int, bool]:
        """Return (node_id, created) for label, assigning the next id if unseen."""
        node_id = self._ids.get(label)
        if node_id is not None:
            return node_id, False
        node_id = len(self._ids)
        self._ids[label] = node_id
        return node_id, True

    def as_dict(self) -> Dict[str, int]:
        return dict(self._ids)
