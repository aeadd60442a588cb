from sqlmodel import SQLModel, Session, create_engine

from finance_tracker.core.config import DATABASE_URL, SQL_ECHO

connect_args = {"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {}

engine = create_engine(DATABASE_URL, echo=SQL_ECHO, connect_args=connect_args)  # echo=True imprime las queries


def create_db_and_tables():
    import finance_tracker.models  # noqa: F401  registra las tablas en el metadata
    SQLModel.metadata.create_all(engine)


def get_session():
    with Session(engine) as session:
        yield session
