"""
Method factory
"""

from ..core.data_models import Algorithm, Parameters
from .lee_richards import LeeRichards
from .shrake_rupley import ShrakeRupley


class MethodFactory:
    """Method factory"""

    @staticmethod
    def create_method(
        algorithm: Algorithm | str,
        parameters: Parameters | None = None,
    ) -> ShrakeRupley | LeeRichards:
        """
        Create SASA method

        Args:
            algorithm: Algorithm (enum or string)
            parameters: Calculation parameters

        Returns:
            ShrakeRupley | LeeRichards: Method instance
        """
        if isinstance(algorithm, str) and not isinstance(algorithm, Algorithm):
            algorithm = Algorithm(algorithm.lower())

        if algorithm == Algorithm.SHRAKE_RUPLEY:
            return ShrakeRupley(parameters)
        elif algorithm == Algorithm.LEE_RICHARDS:
            return LeeRichards(parameters)
        else:
            raise ValueError(f"Unknown algorithm: {algorithm}")

    @staticmethod
    def get_available_methods() -> list:
        """Get available method list"""
        return [algorithm.value for algorithm in Algorithm]
