from .main_presenter import IMainView, MainPresenter

__all__ = ["IMainView", "MainPresenter"]
