from ..model.config import AsaConfig
from .extractors import extract_all
from .tokenizer import tokenize
from .tree import build_tree


def parse_config(text: str) -> AsaConfig:
    """Tokenize, nest, and extract a running-config in one step."""
    return extract_all(build_tree(tokenize(text)))
