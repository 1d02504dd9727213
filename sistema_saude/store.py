"""
Data store handle.

One ClinicStore is built per application in create_app() and reached
through get_store(); handlers never touch the session directly. Lookups
return None when nothing matches, writes commit immediately.
"""
import logging

from flask import current_app
from sqlalchemy import text
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from sistema_saude.errors import InternalError, ValidationError
from sistema_saude.models import User, Doctor, HealthPost, Medication, Appointment
from sistema_saude.services.inventory import apply_quantity

logger = logging.getLogger(__name__)

EXTENSION_KEY = 'clinic_store'


class ClinicStore:

    def __init__(self, db):
        self.db = db

    @property
    def session(self):
        return self.db.session

    def commit(self):
        try:
            self.session.commit()
        except IntegrityError as e:
            self.session.rollback()
            logger.warning("Integrity error on commit: %s", e)
            raise ValidationError('Registro duplicado ou referência inválida')
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.error("Database error on commit: %s", e, exc_info=True)
            raise InternalError('Erro ao gravar no banco de dados', details=type(e).__name__)

    def ping(self):
        try:
            self.session.execute(text("SELECT 1"))
            return True
        except SQLAlchemyError as e:
            logger.error("Database ping failed: %s", e)
            self.session.rollback()
            return False

    # -- users ------------------------------------------------------------

    def get_user(self, user_id):
        if not user_id:
            return None
        return self.session.get(User, user_id)

    def find_user_by_email(self, email):
        return self.session.query(User).filter_by(email=email).first()

    def list_users(self):
        return self.session.query(User).order_by(User.created_at).all()

    def add_user(self, name, email, password, phone=None, role=None):
        user = User(name=name, email=email, phone=phone)
        if role:
            user.role = role
        user.set_password(password)
        self.session.add(user)
        self.commit()
        return user

    # -- doctors ----------------------------------------------------------

    def list_doctors(self, specialty=None):
        query = self.session.query(Doctor)
        if specialty:
            query = query.filter(Doctor.specialty == specialty)
        return query.all()

    def get_doctor(self, doctor_id):
        return self.session.get(Doctor, doctor_id)

    def count_doctors(self):
        return self.session.query(Doctor).count()

    # -- health posts -----------------------------------------------------

    def list_posts(self, neighborhood=None):
        query = self.session.query(HealthPost)
        if neighborhood:
            query = query.filter(HealthPost.neighborhood == neighborhood)
        return query.all()

    def get_post(self, post_id):
        return self.session.get(HealthPost, post_id)

    # -- medications ------------------------------------------------------

    def list_medications(self, name=None, kind=None, status=None, post_id=None):
        query = self.session.query(Medication)
        if name:
            query = query.filter(Medication.name.icontains(name, autoescape=True))
        if kind:
            query = query.filter(Medication.kind == kind)
        if status:
            query = query.filter(Medication.status == status)
        if post_id:
            query = query.filter(Medication.post_id == post_id)
        return query.order_by(Medication.name).all()

    def get_medication(self, medication_id):
        return self.session.get(Medication, medication_id)

    def add_medication(self, name, quantity=0, kind=None, description=None, post_id=None):
        medication = Medication(name=name, kind=kind, description=description, post_id=post_id)
        apply_quantity(medication, quantity)
        self.session.add(medication)
        self.commit()
        return medication

    def update_medication_quantity(self, medication_id, quantity):
        medication = self.get_medication(medication_id)
        if not medication:
            return None
        apply_quantity(medication, quantity)
        self.commit()
        return medication

    def count_medications(self, **predicate):
        return self.session.query(Medication).filter_by(**predicate).count()

    # -- appointments -----------------------------------------------------

    def list_appointments(self, predicate):
        return (
            self.session.query(Appointment)
            .filter_by(**predicate)
            .order_by(Appointment.created_at.desc())
            .all()
        )

    def find_appointment(self, predicate):
        return self.session.query(Appointment).filter_by(**predicate).first()

    def count_appointments(self, predicate, **extra):
        return self.session.query(Appointment).filter_by(**predicate).filter_by(**extra).count()

    def add_appointment(self, fields):
        appointment = Appointment(**fields)
        self.session.add(appointment)
        self.commit()
        return appointment

    def update_appointment(self, guard, changes):
        appointment = self.find_appointment(guard)
        if not appointment:
            return None
        for attr, value in changes.items():
            setattr(appointment, attr, value)
        self.commit()
        return appointment

    def delete_appointment(self, guard):
        appointment = self.find_appointment(guard)
        if not appointment:
            return None
        self.session.delete(appointment)
        self.commit()
        return appointment

    # -- maintenance ------------------------------------------------------

    def reset(self):
        """Delete every record, children first."""
        for model in (Appointment, Medication, Doctor, HealthPost, User):
            self.session.query(model).delete()
        self.commit()


def get_store():
    return current_app.extensions[EXTENSION_KEY]
