# Import all the models, so that Base has them before being
# imported by Alembic
from employee_records.db.base_class import Base  # noqa
from employee_records.models.employee import Employee  # noqa
