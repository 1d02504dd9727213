from sistema_saude.extensions import db
from .base import new_id, utcnow, isoformat

STATUS_AVAILABLE = 'disponivel'
STATUS_LOW = 'baixa'
STATUS_DEPLETED = 'esgotado'


class Medication(db.Model):
    __tablename__ = 'medicamentos'

    id = db.Column(db.String(32), primary_key=True, default=new_id)
    name = db.Column(db.String(120), nullable=False, index=True)
    kind = db.Column(db.String(100), index=True)
    description = db.Column(db.Text)
    post_id = db.Column(db.String(32), db.ForeignKey('postos.id'), index=True)
    quantity = db.Column(db.Integer, nullable=False, default=0)

    # Derived from quantity, see services.inventory.derive_status
    status = db.Column(db.String(20), nullable=False, default=STATUS_DEPLETED, index=True)
    updated_at = db.Column(db.DateTime, default=utcnow, nullable=False)

    post = db.relationship('HealthPost', lazy='joined')

    def to_dict(self):
        return {
            'id': self.id,
            'nome': self.name,
            'tipo': self.kind,
            'descricao': self.description,
            'postoSaude': self.post.to_summary_dict() if self.post else self.post_id,
            'quantidade': self.quantity,
            'status': self.status,
            'ultimaAtualizacao': isoformat(self.updated_at),
        }

    def __repr__(self):
        return f"<Medication {self.name} x{self.quantity} ({self.status})>"
