#!/usr/bin/env python3
"""
Запуск Visitor Pass API через uvicorn (HOST и PORT из .env)

Пропуска живут только в памяти процесса: при RELOAD=true каждая
перезагрузка кода сбрасывает все выданные ссылки.
"""
import os
import uvicorn
from visitor_pass.config import settings

if __name__ == "__main__":
    # RELOAD=true удобен при правке шаблонов билета локально
    reload = os.environ.get("RELOAD", "false").lower() == "true"

    uvicorn.run(
        "visitor_pass.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=reload,
    )
