#!/usr/bin/env python3
"""
Basic Usage Example - FinCalc engine

Shows how a form layer drives the engine:
- Initialize the engine
- Evaluate Coast FIRE readiness
- Compare standard and accelerated mortgage payoff

Run: python examples/basic_usage.py
"""

from fincalc_app.engine import FinanceEngine
from fincalc_app.growth.coast_fire import TargetSource
from fincalc_app.logging import configure_logging
from fincalc_app.validation.inputs import CoastFireInputs, MortgageInputs


def show_coast_fire(engine: FinanceEngine) -> None:
    inputs = CoastFireInputs(
        current_age=30,
        retirement_age=65,
        current_savings=50000,
        expected_return_rate=7,
        target_retirement_amount=1000000,
        monthly_expenses=3500,
    )
    report = engine.coast_fire_report(inputs, target_source=TargetSource.MONTHLY)

    if not report.validation.is_valid:
        for field, message in report.validation.errors.items():
            print(f"   {field}: {message}")
        return

    metrics = report.metrics
    print(f"   Target:                ${metrics.active_target:,.0f}")
    print(f"   Coast FIRE number:     ${metrics.coast_fire_number:,.0f}")
    print(f"   Projected at {inputs.retirement_age}:       ${metrics.future_value:,.0f}")
    print(f"   Still needed today:    ${metrics.additional_savings_needed:,.0f}")
    if metrics.coast_fire_age.is_ok:
        print(f"   Coast FIRE age:        {metrics.coast_fire_age.value}")
    else:
        print(f"   Coast FIRE age:        {metrics.coast_fire_age.display_message}")


def show_mortgage(engine: FinanceEngine, monthly_payment: float) -> None:
    inputs = MortgageInputs(
        principal=300000,
        years_left=25,
        interest_rate=4.5,
        monthly_payment=monthly_payment,
        additional_monthly_payment=500,
        lump_sum_payment=10000,
    )
    metrics = engine.mortgage_report(inputs).metrics

    print(f"   Scheduled payment:     ${metrics.scheduled_payment:,.2f}")
    for name, outcome in (("Standard", metrics.standard), ("Accelerated", metrics.accelerated)):
        if outcome.is_ok:
            print(f"   {name + ':':<22} {outcome.value.months} months, "
                  f"${outcome.value.total_interest:,.2f} interest")
        else:
            print(f"   {name + ':':<22} {outcome.display_message}")

    if metrics.comparison is not None:
        print(f"   Interest saved:        ${metrics.comparison.interest_saved:,.2f}")
        print(f"   Investing instead:     ${metrics.investment.net_benefit:,.2f} after tax")
        print(f"   Better strategy:       {metrics.strategy.value}")


def main():
    """Main demonstration function."""
    configure_logging(level="WARNING")

    print("FinCalc engine - Basic Usage Demo")
    print("=" * 60)

    engine = FinanceEngine()

    print("1. Coast FIRE from monthly expenses")
    show_coast_fire(engine)
    print()

    print("2. Mortgage payoff with extra payments")
    show_mortgage(engine, monthly_payment=1500)
    print()

    print("3. Mortgage payment below the monthly interest")
    show_mortgage(engine, monthly_payment=1000)


if __name__ == "__main__":
    main()
