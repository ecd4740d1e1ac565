from backend.engine.enumerator.enumerator import SolutionEnumerator

__all__ = ["SolutionEnumerator"]
