from sistema_saude.extensions import db, bcrypt
from .base import TimestampMixin, new_id, isoformat

ROLE_PATIENT = 'paciente'
ROLE_DOCTOR = 'medico'
ROLE_ADMIN = 'admin'
ROLES = (ROLE_PATIENT, ROLE_DOCTOR, ROLE_ADMIN)


class User(db.Model, TimestampMixin):
    __tablename__ = 'usuarios'

    id = db.Column(db.String(32), primary_key=True, default=new_id)
    name = db.Column(db.String(120), nullable=False)
    email = db.Column(db.String(120), unique=True, nullable=False, index=True)
    password_hash = db.Column(db.String(255), nullable=False)
    phone = db.Column(db.String(30))

    # Role: 'paciente', 'medico' or 'admin'
    role = db.Column(db.String(20), nullable=False, default=ROLE_PATIENT, index=True)

    def set_password(self, password):
        """Hash and set password"""
        self.password_hash = bcrypt.generate_password_hash(password).decode('utf-8')

    def check_password(self, password):
        """Check if provided password matches hash"""
        if not password:
            return False
        return bcrypt.check_password_hash(self.password_hash, password)

    def to_dict(self):
        # Never expose password_hash
        return {
            'id': self.id,
            'nome': self.name,
            'email': self.email,
            'telefone': self.phone,
            'tipo': self.role,
            'criadoEm': isoformat(self.created_at),
        }

    def to_contact_dict(self):
        return {
            'id': self.id,
            'nome': self.name,
            'email': self.email,
            'telefone': self.phone,
        }

    def __repr__(self):
        return f"<User {self.email} - {self.role}>"
