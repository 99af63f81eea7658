"""
Support Classifier.

Answers whether a lodash symbol has a drop-in counterpart in the replacement
library. The supported set is supplied once and never mutated afterwards.
"""

from typing import FrozenSet, Iterable, List, Tuple


class SupportClassifier:
  """
  Membership test against the exported names of the replacement library.

  Attributes:
      _names (FrozenSet[str]): The immutable set of supported symbol names.
  """

  def __init__(self, names: Iterable[str]) -> None:
    """
    Initializes the classifier.

    Args:
        names: Exported symbol names of the replacement library.
    """
    self._names: FrozenSet[str] = frozenset(names)

  @property
  def names(self) -> FrozenSet[str]:
    """The supported symbol names."""
    return self._names

  def is_supported(self, name: str) -> bool:
    """
    Checks if a symbol can be imported from the replacement library.

    Args:
        name: The lodash symbol name (e.g. 'isEqual').

    Returns:
        bool: True if the symbol is exported by the replacement library.
    """
    return name in self._names

  def is_unsupported(self, name: str) -> bool:
    """Logical negation of :meth:`is_supported`."""
    return not self.is_supported(name)

  def partition(self, names: Iterable[str]) -> Tuple[List[str], List[str]]:
    """
    Splits names into supported and unsupported groups, keeping input order.

    Args:
        names: Symbol names to classify.

    Returns:
        Tuple[List[str], List[str]]: (supported, unsupported).
    """
    supported: List[str] = []
    unsupported: List[str] = []
    for name in names:
      if self.is_supported(name):
        supported.append(name)
      else:
        unsupported.append(name)
    return supported, unsupported

  def __contains__(self, name: object) -> bool:
    return name in self._names

  def __len__(self) -> int:
    return len(self._names)
