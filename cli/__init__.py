# cli - Lakehouse CLI 진입점
