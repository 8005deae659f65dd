"""Factory for creating sparse encoders with registry pattern."""

import logging
from typing import Callable, Dict, List, Type

from sparsevec.encoders.base import BaseSparseEncoder

logger = logging.getLogger(__name__)

_ENCODER_REGISTRY: Dict[str, Type[BaseSparseEncoder]] = {}


def register_encoder(name: str) -> Callable:
    """
    Decorator to register an encoder class.
    
    Usage:
        @register_encoder("tfidf")
        class TFIDFEncoder(BaseSparseEncoder):
            ...
    """
    def decorator(cls: Type[BaseSparseEncoder]) -> Type[BaseSparseEncoder]:
        if name in _ENCODER_REGISTRY:
            logger.warning(f"Overwriting existing encoder: {name}")
        _ENCODER_REGISTRY[name] = cls
        logger.debug(f"Registered encoder: {name} -> {cls.__name__}")
        return cls
    return decorator


def get_registered_encoders() -> List[str]:
    """Return list of registered encoder names."""
    return list(_ENCODER_REGISTRY.keys())


class SparseEncoderFactory:
    """
    Factory that creates sparse encoders based on config.
    
    Usage:
        encoder = SparseEncoderFactory.from_config({"type": "bm25", "k1": 1.2})
        encoder = SparseEncoderFactory.create("tfidf", min_df=2)
    """

    @classmethod
    def create(cls, encoder_type: str, **kwargs) -> BaseSparseEncoder:
        """
        Create an encoder instance.
        
        Args:
            encoder_type: Encoder type ('tfidf', 'bm25')
            **kwargs: Encoder-specific configuration
            
        Returns:
            Encoder instance
            
        Raises:
            ValueError: If encoder_type is unknown
        """
        encoder_type = encoder_type.lower()
        if encoder_type not in _ENCODER_REGISTRY:
            available = get_registered_encoders()
            raise ValueError(
                f"Unknown encoder type: '{encoder_type}'. "
                f"Available: {available}"
            )

        encoder_class = _ENCODER_REGISTRY[encoder_type]
        logger.info(f"Creating encoder: {encoder_type}")

        return encoder_class(**kwargs)

    @classmethod
    def from_config(cls, config: dict, **kwargs) -> BaseSparseEncoder:
        """
        Create encoder from the `encoder` config section.
        
        Args:
            config: Config dict with type and settings
            **kwargs: Additional args (e.g. vector_cls)
            
        Returns:
            Encoder instance
        """
        encoder_type = config.get("type", "tfidf").lower()
        settings = {
            "lowercase": config.get("lowercase", True),
            "min_df": config.get("min_df", 1),
        }
        if encoder_type == "bm25":
            settings["k1"] = config.get("k1", 1.5)
            settings["b"] = config.get("b", 0.75)

        logger.debug(f"Creating encoder from config: type={encoder_type}")

        settings.update(kwargs)
        return cls.create(encoder_type, **settings)
