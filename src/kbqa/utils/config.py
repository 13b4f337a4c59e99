import os
from dataclasses import dataclass
from dotenv import load_dotenv
load_dotenv()


@dataclass
class Settings:
    # empty -> built-in seed corpus (kbqa.bank.question_bank)
    SEED_PATH: str = os.getenv("KBQA_SEED_PATH", "")
    AUTHOR: str = os.getenv("KBQA_AUTHOR", "Current User")

    LOG_LEVEL: str = os.getenv("KBQA_LOG_LEVEL", "INFO")
    UI_CONCURRENCY: int = int(os.getenv("KBQA_UI_CONCURRENCY", "2"))


settings = Settings()
