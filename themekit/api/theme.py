from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import HTMLResponse

from themekit.core.deps import get_theme
from themekit.schemas.theme import RequestContextOut, UserDataQuery, UserDataResult
from themekit.services.option_markup import render_select
from themekit.theme import ThemeBase

router = APIRouter()


@router.post("/users/query", response_model=UserDataResult)
def query_users(payload: UserDataQuery, theme: ThemeBase = Depends(get_theme)):
    rows = theme.get_userdata(
        payload.fields,
        payload.key,
        payload.compare,
        payload.value,
        orderby=payload.orderby,
        order=payload.order,
    )
    if rows is None:
        raise HTTPException(status_code=400, detail="Unsupported comparison operator or sort direction")
    return {"rows": rows, "total": len(rows)}


@router.get("/fields/{field_id}/options")
def field_options(field_id: str, theme: ThemeBase = Depends(get_theme)):
    return {"field_id": field_id, "choices": theme.get_acf_select_field(field_id)}


@router.get("/fields/{field_id}/select", response_class=HTMLResponse)
def field_select(
    field_id: str,
    current: str | None = Query(None),
    name: str | None = Query(None),
    theme: ThemeBase = Depends(get_theme),
):
    choices = theme.get_acf_select_field(field_id)
    options_html = "".join(theme.get_option(value, text, current) for value, text in choices.items())
    if not theme.use_wrapper():
        return HTMLResponse(options_html)
    return HTMLResponse(render_select(name or field_id, options_html))


@router.get("/context", response_model=RequestContextOut)
@router.get("/context/{tail:path}", response_model=RequestContextOut)
def request_context(theme: ThemeBase = Depends(get_theme)):
    return {"segments": theme.segments(), "use_wrapper": theme.use_wrapper()}
