from sistema_saude.extensions import db
from .base import new_id


class Doctor(db.Model):
    """Practitioner profile linked to a user with role 'medico'."""
    __tablename__ = 'medicos'

    id = db.Column(db.String(32), primary_key=True, default=new_id)
    user_id = db.Column(db.String(32), db.ForeignKey('usuarios.id'), nullable=False, index=True)
    specialty = db.Column(db.String(100), index=True)
    crm = db.Column(db.String(30))

    # [{"diaSemana": 1, "horarios": ["08:00", "09:00"]}, ...]
    availability = db.Column(db.JSON, default=list)

    user = db.relationship('User', lazy='joined')

    def to_dict(self):
        return {
            'id': self.id,
            'usuario': self.user.to_contact_dict() if self.user else None,
            'especialidade': self.specialty,
            'crm': self.crm,
            'disponibilidade': self.availability or [],
        }

    def __repr__(self):
        return f"<Doctor {self.user_id} - {self.specialty}>"
