from fastapi import APIRouter

router = APIRouter()

@router.get("/portal/health")
async def health_check():
    return {"status": "ok"}
