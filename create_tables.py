"""Create the Jobly tables in the configured database."""

from jobly.core.database import Base, engine, init_db

init_db()  # registers companies, jobs, users, applications

print("Creating tables...")
Base.metadata.create_all(bind=engine)
print("Tables created successfully!")
