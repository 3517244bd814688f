"""Narrative generator: plain-English interpretation of a cost-model result.

Converts a raw ``CostModelResult`` into a sectioned text block: what the
fleet costs, how the hourly figure is derived, whether the employee is
better off than with a private combustion car, and where an equal employer
budget ends up under a raise vs. a company car.
"""

from __future__ import annotations

from fleet_calc.models.results import CostModelResult


def _header(sections: list[str], title: str) -> None:
    if sections:
        sections.append("")
    sections.append("=" * 60)
    sections.append(title)
    sections.append("=" * 60)


def _share(part: float, whole: float) -> float:
    return part / whole * 100 if whole > 0 else 0.0


def generate_narrative(result: CostModelResult) -> str:
    """Generate a plain-English narrative from a cost-model result."""
    p = result.point_estimate
    h = result.working_hours
    v = result.variable_costs
    c = result.combustion
    wc = result.wage_vs_car

    sections: list[str] = []

    # ── 1. Fleet cost ──
    _header(sections, "FLEET COST")
    sections.append(
        f"Vehicle: {result.scenario_name}\n"
        f"Employees: {p.employee_count}\n"
        f"Gross lease: €{result.lease_gross_monthly:,.2f}/month\n"
        f"Company charge points: {p.charge_points}\n"
        f"Total cost per year: €{p.total_annual:,.0f} "
        f"(after employer tax: €{p.total_annual_effective:,.0f})\n"
        f"Per employee per year: €{p.per_employee_annual:,.0f}\n"
        f"Per employee per hour: €{p.hourly_equivalent:.2f} "
        f"(after employer tax: €{p.hourly_equivalent_effective:.2f})"
    )

    fixed_per_employee = (p.staffing_cost + p.infrastructure_annual) / p.employee_count
    sections.append(
        f"\nVariable cost per employee: €{v.total:,.2f}\n"
        f"Fixed cost per employee (admin + company chargers): €{fixed_per_employee:,.2f}"
    )

    # ── 2. Working hours ──
    _header(sections, "WORKING HOURS")
    sections.append(
        f"Regular hours: {h.base_hours:,.1f}\n"
        f"Weekend hours incl. surcharge: {h.weekend_hours_effective:,.1f}\n"
        f"Overtime allowance hours: {h.overtime_hours:,.1f}\n"
        f"Effective annual hours: {h.annual_hours:,.1f}"
    )

    # ── 3. Employee vs. combustion car ──
    _header(sections, "EMPLOYEE VS. PRIVATE COMBUSTION CAR")
    verdict = "SAVES" if wc.employee_savings >= 0 else "LOSES"
    sections.append(
        f"Combustion car per year: €{c.total:,.0f} (€{c.total / 12:,.0f}/month)\n"
        f"Company car cost to employee: €{wc.employee_company_car_cost:,.0f} "
        f"(€{wc.employee_company_car_cost / 12:,.0f}/month; "
        f"benefit-in-kind tax €{wc.employee_tax_on_benefit:,.0f} + "
        f"private electricity €{wc.employee_electricity_cost:,.0f})\n"
        f"Employee {verdict} €{abs(wc.employee_savings):,.0f} per year "
        f"(€{abs(wc.employee_savings) / 12:,.0f}/month) with the company car."
    )

    # ── 4. Raise vs. company car ──
    _header(sections, "RAISE VS. COMPANY CAR (EQUAL EMPLOYER SPEND)")
    spend = wc.wage.employer_spend
    sections.append(f"Employer spend per employee: €{spend:,.0f}\n\nAs a raise:")
    for name, val in wc.wage.components.items():
        sections.append(f"  {name:20s}  €{val:10,.0f}  ({_share(val, spend):5.1f}%)")
    sections.append("\nAs a company car:")
    for name, val in wc.car.components.items():
        sections.append(f"  {name:20s}  €{val:10,.0f}  ({_share(val, spend):5.1f}%)")

    benefit = wc.car.car_value + wc.car.extras
    sections.append(
        f"\nOnly {_share(wc.wage.net_wage, spend):.1f}% of a raise reaches the employee as net wage.\n"
        f"As a company car, {_share(benefit, spend):.1f}% is benefit (car value + extras)."
    )

    return "\n".join(sections)
