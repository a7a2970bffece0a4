"""
Models module with the closed-form dip lineshapes.
"""

from .lineshapes import transmission_spectra, my_gauss, transmission_spectra_2
from .registry import ModelRegistry, evaluate_parameters


# Register default models
def register_default_models():
    """Register the built-in dip models with the global registry."""
    registry = ModelRegistry()

    registry.register('lorentzian', transmission_spectra,
                      description="Asymmetric Lorentzian dip")
    registry.register('gaussian', my_gauss,
                      description="Gaussian dip")
    registry.register('hybrid', transmission_spectra_2,
                      description="Lorentzian or Lorentzian/Gaussian blend, chosen by fcn")

    return registry

# Auto-register on import
_default_registry = register_default_models()

MODEL_KINDS = tuple(_default_registry.list_models())

__all__ = [
    'transmission_spectra',
    'my_gauss',
    'transmission_spectra_2',
    'ModelRegistry',
    'evaluate_parameters',
    'register_default_models',
    'MODEL_KINDS',
]
