"""Type definitions for ringqueue."""

from typing import Literal, TypeAlias

# Which end of the queue an insert or remove acts on
End: TypeAlias = Literal["head", "tail"]
