from contextlib import contextmanager


@contextmanager
def transaction(session):
    """
    Tek commit noktası: blok içindeki tüm yazmalar birlikte commit edilir,
    herhangi bir hata olursa hepsi rollback edilir ve hata yukarı fırlatılır.
    """
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
