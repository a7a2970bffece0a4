"""
Model registry for selecting dip models by name.
"""

import inspect
from typing import Any, Callable, Dict, List, Optional

import numpy as np

from ..core.data_structures import ModelParameters, SimulatedSpectrum, as_axis
from ..core.exceptions import ConfigurationError


class ModelRegistry:
    """Registry for managing available dip models."""

    _instance = None

    def __new__(cls):
        """Singleton pattern for global registry."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._models = {}
            cls._instance._metadata = {}
        return cls._instance

    def register(self,
                 name: str,
                 function: Callable[..., np.ndarray],
                 description: Optional[str] = None,
                 **metadata):
        """
        Register a model function.

        Args:
            name: Unique model identifier
            function: Callable ``f(x, a, x0, w, bias[, fcn])``
            description: Model description
            **metadata: Additional metadata
        """
        if not callable(function):
            raise TypeError(f"{function!r} is not callable")

        self._models[name] = function
        self._metadata[name] = {
            'function': function.__name__,
            'description': description or (inspect.getdoc(function) or '').split('\n')[0],
            'takes_selector': 'fcn' in inspect.signature(function).parameters,
            **metadata
        }

    def unregister(self, name: str):
        """Remove a model from registry."""
        if name in self._models:
            del self._models[name]
            del self._metadata[name]

    def get_model(self, name: str) -> Callable[..., np.ndarray]:
        """Get model function by name."""
        if name not in self._models:
            raise KeyError(f"Model '{name}' not found in registry")
        return self._models[name]

    def list_models(self) -> List[str]:
        """List available model names, in registration order."""
        return list(self._models.keys())

    def get_metadata(self, name: str) -> Dict[str, Any]:
        """Get model metadata."""
        return self._metadata.get(name, {})

    def has_model(self, name: str) -> bool:
        """Check if model is registered."""
        return name in self._models

    def takes_selector(self, name: str) -> bool:
        """Whether the model needs the ``fcn`` selector."""
        self.get_model(name)
        return self._metadata[name]['takes_selector']


def evaluate_parameters(kind: str,
                        axis,
                        parameters: ModelParameters,
                        fcn: Optional[float] = None,
                        registry: Optional[ModelRegistry] = None) -> SimulatedSpectrum:
    """
    Evaluate one parameter set with a registered model.

    Args:
        kind: Registered model name
        axis: Wavelength axis (any 1-D sequence)
        parameters: Dip parameters
        fcn: Selector, required by models that take one
        registry: Model registry (uses global if None)

    Returns:
        SimulatedSpectrum aligned with ``axis``
    """
    registry = registry or ModelRegistry()
    function = registry.get_model(kind)
    axis = as_axis(axis)

    if registry.takes_selector(kind):
        if fcn is None:
            raise ConfigurationError(f"Model '{kind}' requires the fcn selector")
        values = function(axis, *parameters.as_tuple(), fcn)
    else:
        if fcn is not None:
            raise ConfigurationError(f"Model '{kind}' does not take a selector")
        values = function(axis, *parameters.as_tuple())

    return SimulatedSpectrum(
        axis=axis,
        transmission=values,
        model=kind,
        parameters=parameters,
        selector=fcn
    )
