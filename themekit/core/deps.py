from fastapi import Depends, Request
from sqlalchemy.orm import Session
from themekit.core.request_context import RequestContext
from themekit.db.session import get_db
from themekit.services.content_filters import content_filters
from themekit.services.data_store import SqlAlchemyDataStore
from themekit.services.field_options import SqlAlchemyFieldProvider
from themekit.theme import ThemeBase

def get_theme(request: Request, db: Session = Depends(get_db)) -> ThemeBase:
    return ThemeBase(
        RequestContext.from_request(request),
        store=SqlAlchemyDataStore(db),
        fields=SqlAlchemyFieldProvider(db),
        filters=content_filters,
    )
