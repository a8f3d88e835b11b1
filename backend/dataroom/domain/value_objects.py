"""
Value Objects - Immutable objects that represent domain concepts.
These have no identity and are compared by value.
"""
from datetime import datetime
from typing import Callable, NewType

# Value objects for type safety and domain clarity
FolderId = NewType("FolderId", str)
FileId = NewType("FileId", str)

# The only file kind the data room stores
PDF_FILE_KIND = "pdf"

# Injected collaborators: identifier generator and clock
IdFactory = Callable[[], str]
Clock = Callable[[], datetime]
