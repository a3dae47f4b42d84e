"""SQLAlchemy models for bookkeeper database."""

from sqlalchemy import (
    Boolean,
    Column,
    Date,
    ForeignKey,
    Integer,
    Numeric,
    String,
    UniqueConstraint,
    create_engine,
    event,
)
from sqlalchemy.orm import declarative_base, relationship, scoped_session, sessionmaker

Base = declarative_base()


class Country(Base):
    """ISO 3166 country model (seeded, read only)."""

    __tablename__ = "countries"

    code = Column(String(2), primary_key=True)
    name = Column(String, nullable=False)


class Currency(Base):
    """Currency model."""

    __tablename__ = "currencies"

    id = Column(Integer, primary_key=True)
    name = Column(String, unique=True, nullable=False)
    code = Column(String, unique=True, nullable=False)


class Bank(Base):
    """Bank model."""

    __tablename__ = "banks"

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)
    country = Column(String(2), ForeignKey("countries.code"), nullable=False)

    __table_args__ = (UniqueConstraint("name", "country", name="uq_bank_name_country"),)


class Person(Base):
    """Person model."""

    __tablename__ = "people"

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)


class TransactionCategory(Base):
    """Transaction category model with hierarchical structure."""

    __tablename__ = "transaction_categories"

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)
    parent_id = Column(Integer, ForeignKey("transaction_categories.id"), nullable=True)

    __table_args__ = (UniqueConstraint("name", "parent_id", name="uq_category_name_parent"),)

    # Relationships
    parent = relationship("TransactionCategory", remote_side=[id], backref="children")


class BankAccount(Base):
    """Bank account model."""

    __tablename__ = "bank_accounts"

    id = Column(Integer, primary_key=True)
    bank_id = Column(Integer, ForeignKey("banks.id"), nullable=False)
    currency_id = Column(Integer, ForeignKey("currencies.id"), nullable=False)
    account_number = Column(String, nullable=False)
    balance = Column(Numeric(14, 2), nullable=False, default=0)

    __table_args__ = (
        UniqueConstraint("bank_id", "currency_id", "account_number", name="uq_bank_account"),
    )


class CreditCard(Base):
    """Credit card model."""

    __tablename__ = "credit_cards"

    id = Column(Integer, primary_key=True)
    bank_id = Column(Integer, ForeignKey("banks.id"), nullable=False)
    person_id = Column(Integer, ForeignKey("people.id"), nullable=False)
    number = Column(String, unique=True, nullable=False)
    name = Column(String, nullable=True)

    # Relationships
    currencies = relationship(
        "CreditCardCurrency",
        back_populates="credit_card",
        cascade="all, delete-orphan",
        order_by="CreditCardCurrency.currency_id",
    )


class CreditCardCurrency(Base):
    """Currency enabled on a credit card."""

    __tablename__ = "credit_card_currencies"

    id = Column(Integer, primary_key=True)
    credit_card_id = Column(Integer, ForeignKey("credit_cards.id"), nullable=False)
    currency_id = Column(Integer, ForeignKey("currencies.id"), nullable=False)

    __table_args__ = (
        UniqueConstraint("credit_card_id", "currency_id", name="uq_credit_card_currency"),
    )

    # Relationships
    credit_card = relationship("CreditCard", back_populates="currencies")


class CreditCardCycle(Base):
    """Credit card billing cycle model."""

    __tablename__ = "credit_card_cycles"

    id = Column(Integer, primary_key=True)
    credit_card_id = Column(Integer, ForeignKey("credit_cards.id"), nullable=False)
    closing_date = Column(Date, nullable=False)
    due_date = Column(Date, nullable=False)

    __table_args__ = (
        UniqueConstraint("credit_card_id", "closing_date", "due_date", name="uq_credit_card_cycle"),
    )

    # Relationships
    balances = relationship(
        "CreditCardCycleBalance", back_populates="cycle", cascade="all, delete-orphan"
    )


class CreditCardCycleBalance(Base):
    """Per-currency balance of a billing cycle."""

    __tablename__ = "credit_card_cycle_balances"

    id = Column(Integer, primary_key=True)
    credit_card_cycle_id = Column(Integer, ForeignKey("credit_card_cycles.id"), nullable=False)
    currency_id = Column(Integer, ForeignKey("currencies.id"), nullable=False)
    balance = Column(Numeric(14, 2), nullable=False, default=0)
    paid = Column(Boolean, nullable=False, default=False)

    __table_args__ = (
        UniqueConstraint("credit_card_cycle_id", "currency_id", name="uq_cycle_balance_currency"),
    )

    # Relationships
    cycle = relationship("CreditCardCycle", back_populates="balances")


class CreditCardInstallment(Base):
    """Installment plan model."""

    __tablename__ = "credit_card_installments"

    id = Column(Integer, primary_key=True)
    credit_card_id = Column(Integer, ForeignKey("credit_cards.id"), nullable=False)
    currency_id = Column(Integer, ForeignKey("currencies.id"), nullable=False)
    concept = Column(String, nullable=False)
    amount = Column(Numeric(14, 2), nullable=False)
    start_date = Column(Date, nullable=False)
    count = Column(Integer, nullable=False)

    __table_args__ = (
        UniqueConstraint("credit_card_id", "currency_id", "concept", name="uq_installment_concept"),
    )


class CreditCardSubscription(Base):
    """Subscription model."""

    __tablename__ = "credit_card_subscriptions"

    id = Column(Integer, primary_key=True)
    credit_card_id = Column(Integer, ForeignKey("credit_cards.id"), nullable=False)
    currency_id = Column(Integer, ForeignKey("currencies.id"), nullable=False)
    concept = Column(String, nullable=False)
    amount = Column(Numeric(14, 2), nullable=False)

    __table_args__ = (
        UniqueConstraint("credit_card_id", "currency_id", "concept", name="uq_subscription_concept"),
    )


class Transaction(Base):
    """Transaction model."""

    __tablename__ = "transactions"

    id = Column(Integer, primary_key=True)
    transaction_date = Column(Date, nullable=False)
    type = Column(String, nullable=False)
    amount = Column(Numeric(14, 2), nullable=False)
    notes = Column(String, nullable=True)
    person_id = Column(Integer, ForeignKey("people.id"), nullable=False)
    bank_account_id = Column(Integer, ForeignKey("bank_accounts.id"), nullable=False)
    category_id = Column(Integer, ForeignKey("transaction_categories.id"), nullable=False)


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_session_factory(database_url: str) -> scoped_session:
    """Create a thread-local SQLAlchemy session registry and the schema."""
    connect_args = {}
    if database_url.startswith("sqlite"):
        connect_args = {"check_same_thread": False}

    engine = create_engine(database_url, echo=False, connect_args=connect_args)
    if engine.dialect.name == "sqlite":
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)

    Base.metadata.create_all(engine)
    return scoped_session(sessionmaker(bind=engine))
