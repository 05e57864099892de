"""Investment growth, capital-gains tax and payoff-versus-invest comparison."""

from .comparison import Strategy, after_tax, better_strategy, investment_value

__all__ = ["Strategy", "after_tax", "better_strategy", "investment_value"]
