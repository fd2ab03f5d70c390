import dataclasses
import importlib.util
from dataclasses import dataclass

from raytracer.scene import Scene


@dataclass(frozen=True)
class Settings:
    width: int = 1024
    height: int = 768
    samples_per_direction: int = 2
    max_bounces: int = 3
    workers: int = 1
    output_path: str = "./output.png"

    def __post_init__(self):
        for name in ["width", "height", "samples_per_direction", "workers"]:
            value = getattr(self, name)
            if value <= 0:
                raise ValueError(f"expected {name} {value} to be > 0")
        if self.max_bounces < 0:
            raise ValueError(f"expected max_bounces {self.max_bounces} to be >= 0")


@dataclass(frozen=True)
class Config:
    scene: Scene
    settings: Settings = Settings()


def load_config(config_path, **kwargs):
    spec = importlib.util.spec_from_file_location("config", config_path)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    config = module.config

    overrides = {k: kwargs[k] for k in kwargs if kwargs[k] is not None}
    if overrides:
        config = dataclasses.replace(config, settings=dataclasses.replace(config.settings, **overrides))

    return config
