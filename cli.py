import typer

app = typer.Typer()


@app.command()
def init_db():
    from models import Base, engine

    Base.metadata.create_all(engine)
    print("city table ready")


@app.command()
def seed_cities():
    from core.store import RecordStore
    from models import engine
    from seeders.initial_city import initial_city

    store = RecordStore(engine)
    try:
        written = initial_city(store=store)
    finally:
        store.close()
    print(f"{written} cities written")


@app.command()
def serve(reload: bool = False):
    import uvicorn
    from settings import HOST, PORT

    uvicorn.run("main:app", host=HOST, port=PORT, reload=reload)


if __name__ == "__main__":
    app()
