from sistema_saude.extensions import db
from .base import new_id


class HealthPost(db.Model):
    """Health post (posto de saúde) - static reference data."""
    __tablename__ = 'postos'

    id = db.Column(db.String(32), primary_key=True, default=new_id)
    name = db.Column(db.String(120), nullable=False)
    address = db.Column(db.String(255))
    neighborhood = db.Column(db.String(100), index=True)
    lat = db.Column(db.Float)
    lng = db.Column(db.Float)
    phone = db.Column(db.String(30))
    opening_hours = db.Column(db.String(120))

    def to_summary_dict(self):
        return {
            'id': self.id,
            'nome': self.name,
            'endereco': self.address,
            'bairro': self.neighborhood,
        }

    def to_dict(self):
        return {
            'id': self.id,
            'nome': self.name,
            'endereco': self.address,
            'bairro': self.neighborhood,
            'coordenadas': {'lat': self.lat, 'lng': self.lng},
            'telefone': self.phone,
            'horarioFuncionamento': self.opening_hours,
        }

    def __repr__(self):
        return f"<HealthPost {self.name} ({self.neighborhood})>"
