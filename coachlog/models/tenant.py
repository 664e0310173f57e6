from typing import Optional

from ..db import db, new_id, utcnow


class Trainer(db.Model):
    """Ein Trainer = ein Mandant (Tenant). Übungen und Kunden hängen an ihm."""
    __tablename__ = "trainers"

    id = db.Column(db.String(36), primary_key=True, default=new_id)
    name = db.Column(db.String(120), nullable=False)
    created_at = db.Column(db.DateTime, nullable=False, default=utcnow)

    customers = db.relationship("Customer", back_populates="trainer", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<Trainer {self.name}>"


class Customer(db.Model):
    __tablename__ = "customers"

    id = db.Column(db.String(36), primary_key=True, default=new_id)
    trainer_id = db.Column(db.String(36), db.ForeignKey("trainers.id", ondelete="CASCADE"), nullable=False)
    name = db.Column(db.String(120), nullable=False)
    email = db.Column(db.String(255))
    created_at = db.Column(db.DateTime, nullable=False, default=utcnow)

    trainer = db.relationship("Trainer", back_populates="customers")

    def __repr__(self):
        return f"<Customer {self.name}>"


def create_trainer(name: str) -> Trainer:
    trainer = Trainer(name=name)
    db.session.add(trainer)
    db.session.commit()
    return trainer


def create_customer(trainer_id: str, name: str, email: Optional[str] = None) -> Customer:
    customer = Customer(trainer_id=trainer_id, name=name, email=email)
    db.session.add(customer)
    db.session.commit()
    return customer


def get_trainer(trainer_id: str) -> Optional[Trainer]:
    return db.session.get(Trainer, trainer_id)


def get_customer(customer_id: str) -> Optional[Customer]:
    return db.session.get(Customer, customer_id)
