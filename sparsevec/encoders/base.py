"""Abstract base class for sparse encoders."""
from abc import ABC, abstractmethod
from typing import List, Tuple

from sparsevec.vectors.base import VectorOps


class BaseSparseEncoder(ABC):
    """
    Abstract base class that all sparse encoders must implement.
    
    Ensures consistent interface across:
    - TF-IDF encoder
    - BM25 encoder
    """

    @abstractmethod
    def fit(self, corpus: List[str]) -> "BaseSparseEncoder":
        """
        Learn vocabulary and term statistics from a corpus.
        
        Args:
            corpus: List of document texts
            
        Returns:
            self
        """
        pass

    @abstractmethod
    def encode(self, text: str) -> VectorOps:
        """
        Encode text to sparse vector.
        
        Args:
            text: Input text
            
        Returns:
            Sparse vector keyed by vocabulary dimension
        """
        pass

    def encode_batch(self, texts: List[str]) -> List[VectorOps]:
        """
        Encode multiple texts.
        
        Args:
            texts: List of input texts
            
        Returns:
            List of sparse vectors
        """
        return [self.encode(text) for text in texts]

    @abstractmethod
    def decode(self, vector: VectorOps, top_k: int = 10) -> List[Tuple[str, float]]:
        """
        Map the heaviest dimensions of a vector back to tokens.
        
        Args:
            vector: Vector produced by this encoder
            top_k: Number of tokens to return
            
        Returns:
            List of (token, weight) tuples sorted by weight
        """
        pass
