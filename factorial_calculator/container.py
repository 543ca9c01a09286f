from dependency_injector import containers, providers

from .factorial_calculator import FactorialCalculator


class Container(containers.DeclarativeContainer):
    """DI Container for the factorial calculator service.

    FactorialCalculator is a singleton itself, so a Factory provider is
    enough and every container hands out the same class-level instance.
    """

    calculator = providers.Factory(FactorialCalculator)
