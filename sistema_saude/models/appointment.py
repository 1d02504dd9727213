from sistema_saude.extensions import db
from .base import TimestampMixin, new_id, isoformat

STATUS_PENDING = 'pendente'
STATUS_DONE = 'realizada'


class Appointment(db.Model, TimestampMixin):
    __tablename__ = 'consultas'

    id = db.Column(db.String(32), primary_key=True, default=new_id)

    # Always the user who created the appointment, never reassigned
    patient_id = db.Column(db.String(32), db.ForeignKey('usuarios.id'), nullable=False, index=True)
    doctor_id = db.Column(db.String(32), db.ForeignKey('medicos.id'), nullable=True, index=True)

    date = db.Column(db.Date, nullable=False)
    time = db.Column(db.String(10), nullable=False)  # e.g. "10:45"
    kind = db.Column(db.String(50), nullable=False)  # e.g. "presencial"
    specialty = db.Column(db.String(100))
    status = db.Column(db.String(30), nullable=False, default=STATUS_PENDING)
    notes = db.Column(db.Text)

    doctor = db.relationship('Doctor', lazy='joined')

    def to_dict(self):
        return {
            'id': self.id,
            'paciente': self.patient_id,
            'medico': self.doctor.to_dict() if self.doctor else None,
            'medicoId': self.doctor_id,
            'data': isoformat(self.date),
            'horario': self.time,
            'tipo': self.kind,
            'especialidade': self.specialty,
            'status': self.status,
            'observacoes': self.notes,
            'criadoEm': isoformat(self.created_at),
        }

    def __repr__(self):
        return f"<Appointment {self.patient_id} - {self.doctor_id} on {self.date} {self.time}>"
