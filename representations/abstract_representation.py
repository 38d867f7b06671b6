from abc import ABC, abstractmethod
from typing import List


class Representation(ABC):
    # Abstract base class for the encodings a Boolean function can be given in.

    encoding = ""

    @abstractmethod
    def to_truth_table(self, nvar: int) -> List[bool]:
        # Decode into a truth table of length 2^nvar.
        # Raises EncodingError if the encoded value does not describe such a table.
        pass
