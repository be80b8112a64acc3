"""Example: run a payroll settlement through the service layer (no Flask).

Controllers are a thin layer; the calculation lives in the payroll services.
"""

import importlib

from dotenv import load_dotenv

from config import get_settings_module

from payroll_system.container import build_container
from payroll_system.main import configure_logging
from payroll_system.payroll.model import Period
from payroll_system.payroll.policy import PayrollPolicy


def main():
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    container = build_container(db_config=settings.DB_CONFIG, policy=PayrollPolicy.from_settings(settings))
    run = container.payroll_run_service.run(Period.month_of(2019, 9))
    for category, payrolls in run.payrolls.items():
        for p in payrolls:
            print(category.value, p.employee_id, p.amount)
    print("total", run.total)


if __name__ == "__main__":
    main()
