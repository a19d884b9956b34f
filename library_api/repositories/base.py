from library_api.utils.pagination import Page, paginate


class BaseRepo:
    """Common session-bound helpers; subclasses set ``model``."""

    model = None

    def __init__(self, session):
        self.session = session

    def query(self):
        return self.session.query(self.model)

    def get(self, entity_id: int):
        return self.session.get(self.model, entity_id)

    def list_page(self, page: int, limit: int) -> Page:
        return paginate(self.query().order_by(self.model.id.asc()), page, limit)

    def add(self, entity):
        self.session.add(entity)
        self.session.flush()
        return entity

    def delete(self, entity):
        self.session.delete(entity)
        self.session.flush()
