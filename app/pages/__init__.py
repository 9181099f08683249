from __future__ import annotations

# Import routes for side effects. Registers @ui.page decorators
from . import auth
from . import invoice_create
from . import invoice_edit
from . import invoices
