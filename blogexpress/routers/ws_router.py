from fastapi import APIRouter, WebSocket, WebSocketDisconnect
from loguru import logger

from blogexpress.services.broadcaster import broadcaster

router = APIRouter()


@router.websocket("/ws")
async def events(websocket: WebSocket) -> None:
    await websocket.accept()

    if not broadcaster.subscribe(websocket):
        await websocket.close(code=4029, reason="Too many connections")
        return

    logger.info(f"[ws] subscriber connected ({broadcaster.subscriber_count})")
    try:
        # events sent after this frame reach the client
        await websocket.send_json({"type": "connected", "enabled": broadcaster.enabled})
        # pushes come from broadcaster; reads only keep the socket alive
        while True:
            await websocket.receive_text()
    except WebSocketDisconnect:
        pass
    finally:
        broadcaster.unsubscribe(websocket)
        logger.info(f"[ws] subscriber disconnected ({broadcaster.subscriber_count})")
