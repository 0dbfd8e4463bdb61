from .circulation import CirculationService

__all__ = ['CirculationService']
