from sqlmodel import SQLModel, Session, create_engine

from balance_compartido.core.config import DATABASE_URL, DB_ECHO

connect_args = {"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {}

engine = create_engine(DATABASE_URL, echo=DB_ECHO, connect_args=connect_args)

def create_db_and_tables():
    import balance_compartido.models  # noqa: F401  registra las tablas
    SQLModel.metadata.create_all(engine)

def get_session():
    with Session(engine) as session:
        yield session
