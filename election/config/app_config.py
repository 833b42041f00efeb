#!filepath: election/config/app_config.py
import os

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel

from .experiment_config import BackwardConfig, ExperimentConfig
from .log_config import LogConfig


def project_root() -> str:
    """
    election/config/app_config.py → election/config → election → project_root
    """
    return os.path.abspath(os.path.join(os.path.dirname(__file__), "../../"))


def default_config_path() -> str:
    return os.path.join(os.path.dirname(os.path.abspath(__file__)), "base.yml")


# env → experiment 字段覆盖
_ENV_OVERRIDES = {
    "ELECTION_SEED": "seed",
    "ELECTION_WORKERS": "workers",
}


class AppConfig(BaseModel):
    log: LogConfig = LogConfig()
    experiment: ExperimentConfig = ExperimentConfig()
    backward: BackwardConfig = BackwardConfig()

    @classmethod
    def load(cls, path: str | None = None) -> "AppConfig":
        """
        加载 YAML 配置 + .env
        - 默认使用 election/config/base.yml
        - 不依赖当前工作目录
        - ELECTION_SEED / ELECTION_WORKERS 覆盖 experiment 配置
        """
        load_dotenv(os.path.join(project_root(), ".env"))

        if path is None:
            path = default_config_path()

        if not os.path.exists(path):
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}

        experiment = raw.setdefault("experiment", {})
        for env_key, field in _ENV_OVERRIDES.items():
            value = os.getenv(env_key)
            if value:
                experiment[field] = int(value)

        return cls(**raw)
