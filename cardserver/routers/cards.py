"""CRUD endpoints for cards. Mounted under ``/cards`` (and ``/api/cards``)."""
from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Body, Request, status
from fastapi.responses import JSONResponse, Response

from cardserver.schemas.card import CardIn, CardOut
from cardserver.services.card_service import (
    CardNotFoundError,
    CardService,
    InvalidCardError,
)

router = APIRouter()


def _get_card_service(request: Request) -> CardService:
    svc = getattr(getattr(request.app, "state", None), "card_service", None)
    if not svc:
        raise RuntimeError("CardService not configured")
    return svc


def _error(message: str, status_code: int) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=status_code)


def _input(payload: Optional[CardIn]) -> dict:
    return payload.to_input() if payload is not None else {}


@router.get("", response_model=List[CardOut])
def list_cards(request: Request):
    cards = _get_card_service(request).list_cards()
    return [CardOut.from_card(card) for card in cards]


@router.get("/{card_id}", response_model=CardOut)
def get_card(card_id: str, request: Request):
    try:
        card = _get_card_service(request).get_card(card_id)
    except CardNotFoundError as exc:
        return _error(str(exc), status.HTTP_404_NOT_FOUND)
    return CardOut.from_card(card)


@router.post("", response_model=CardOut, status_code=status.HTTP_201_CREATED)
def create_card(request: Request, payload: Optional[CardIn] = Body(None)):
    try:
        card = _get_card_service(request).create_card(_input(payload))
    except InvalidCardError as exc:
        return _error(str(exc), status.HTTP_400_BAD_REQUEST)
    return CardOut.from_card(card)


@router.put("/{card_id}", response_model=CardOut)
def update_card(card_id: str, request: Request, payload: Optional[CardIn] = Body(None)):
    svc = _get_card_service(request)
    try:
        card = svc.update_card(card_id, _input(payload))
    except InvalidCardError as exc:
        return _error(str(exc), status.HTTP_400_BAD_REQUEST)
    except CardNotFoundError as exc:
        return _error(str(exc), status.HTTP_404_NOT_FOUND)
    return CardOut.from_card(card)


@router.delete("/{card_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_card(card_id: str, request: Request):
    try:
        _get_card_service(request).delete_card(card_id)
    except CardNotFoundError as exc:
        return _error(str(exc), status.HTTP_404_NOT_FOUND)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
