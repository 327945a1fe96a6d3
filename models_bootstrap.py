# models_bootstrap.py
# imported for its side effect: every mapped table is registered on Base.metadata
from employee import models as _employee_models
