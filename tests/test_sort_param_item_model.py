import pytest

from davbrowse.logger import Logger
from davbrowse.settings_json_file import SettingsJsonFile
from davbrowse.sort_param import FileItemRole, default_sort_params
from davbrowse.sort_param_item_model import DESCENDING_ROLE, DISPLAY_ROLE, SortParamItemModel


@pytest.fixture
def settings(tmp_path):
    return SettingsJsonFile(Logger(), tmp_path)


def roles(model):
    return [p.role for p in model._data]


def test_loads_default_params(settings):
    model = SortParamItemModel(settings)
    assert model.row_count() == len(default_sort_params())
    assert model.data(0, DISPLAY_ROLE) == "Type (directories are higher)"
    assert model.data(0, DESCENDING_ROLE) is False
    assert model.has_changes() is False


def test_unknown_role(settings):
    model = SortParamItemModel(settings)
    assert model.data(0, 7) is None
    assert model.set_data(0, True, DISPLAY_ROLE) is False


def test_set_descending_and_save(settings):
    model = SortParamItemModel(settings)
    assert model.set_data(1, True, DESCENDING_ROLE) is True
    assert model.set_data(1, True, DESCENDING_ROLE) is False
    assert model.has_changes() is True
    assert settings.sort_params[1].descending is False
    model.save()
    assert settings.sort_params[1].descending is True
    assert model.has_changes() is False


def test_move_up_and_down(settings):
    model = SortParamItemModel(settings)
    before = roles(model)
    model.move_up(1)
    assert roles(model)[:2] == [before[1], before[0]]
    model.move_down(0)
    assert roles(model) == before


def test_move_out_of_range(settings):
    model = SortParamItemModel(settings)
    with pytest.raises(IndexError):
        model.move_up(0)
    with pytest.raises(IndexError):
        model.move_down(model.row_count() - 1)


def test_invert(settings):
    model = SortParamItemModel(settings)
    before = roles(model)
    model.invert()
    assert roles(model) == list(reversed(before))
    assert model.has_changes() is True
    model.invert()
    assert roles(model) == before


def test_reset_changes(settings):
    model = SortParamItemModel(settings)
    model.move_up(2)
    model.set_data(0, True, DESCENDING_ROLE)
    model.reset_changes()
    assert model.has_changes() is False
    assert roles(model)[0] == FileItemRole.FILE_FLAG


def test_role_names(settings):
    assert SortParamItemModel(settings).role_names()[DESCENDING_ROLE] == "descending"