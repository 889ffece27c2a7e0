from __future__ import annotations
from core.context import DashboardContext, FilterSet

class BaseView:
    def __init__(self, ctx: DashboardContext, filters: FilterSet):
        self.ctx = ctx
        self.f = filters

    def render(self):
        raise NotImplementedError
