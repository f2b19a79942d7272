"""DB 모델과 리포지토리."""
