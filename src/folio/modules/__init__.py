"""Built-in pipeline modules."""

from folio.modules.branch import Branch
from folio.modules.conditional import If
from folio.modules.read_files import ReadFiles
from folio.modules.transform import Content, Meta

__all__ = [
    'Branch',
    'Content',
    'If',
    'Meta',
    'ReadFiles'
]
