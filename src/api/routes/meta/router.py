"""Router dos canais Meta: WhatsApp e Instagram compartilham o webhook."""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.meta.webhook import router as webhook_router

router = APIRouter()

# GET para challenge, POST para eventos
router.include_router(webhook_router, prefix="/webhook")
