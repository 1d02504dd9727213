"""
Medication stock status.

The status of a medication is never written directly: every quantity
write goes through apply_quantity(), which keeps status and the
last-updated timestamp consistent with the stored quantity.
"""
from sistema_saude.errors import ValidationError
from sistema_saude.models.base import utcnow
from sistema_saude.models.medication import STATUS_AVAILABLE, STATUS_LOW, STATUS_DEPLETED

LOW_STOCK_THRESHOLD = 10


def parse_quantity(value):
    """Validate a client supplied quantity, returning it as an int."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError('Campo "quantidade" deve ser um inteiro')
    if value < 0:
        raise ValidationError('Campo "quantidade" não pode ser negativo')
    return value


def derive_status(quantity):
    """Map a stock quantity to 'esgotado', 'baixa' or 'disponivel'."""
    quantity = parse_quantity(quantity)
    if quantity == 0:
        return STATUS_DEPLETED
    if quantity < LOW_STOCK_THRESHOLD:
        return STATUS_LOW
    return STATUS_AVAILABLE


def apply_quantity(medication, quantity, now=None):
    """Set quantity, derived status and ultimaAtualizacao on a medication."""
    medication.status = derive_status(quantity)
    medication.quantity = quantity
    medication.updated_at = now or utcnow()
    return medication
