"""CLI tests: command discovery and `rime-scheme` subcommands run through main()."""

import io
import json
from pathlib import Path

import pytest
from PIL import Image
from rime_scheme import registry
from rime_scheme.__main__ import main
from rime_scheme.core.preview import BORDER, CANVAS
from rime_scheme.core.types import Command, UnknownNameError

FIXTURES_DIR = Path(__file__).parent / 'fixtures'
WEASEL = str(FIXTURES_DIR / 'weasel.yaml')
SQUIRREL = str(FIXTURES_DIR / 'squirrel.yaml')


def _run(prefs: Path, *argv: str) -> None:
    main(['--prefs', str(prefs), *argv])


class TestRegistry:
    def test_discovers_all_commands(self):
        names = set(registry.discover())
        assert names == {
            'blend',
            'convert',
            'export',
            'import-color',
            'load',
            'platform',
            'prefs',
            'preview',
            'remove',
            'save',
            'saved',
            'set',
            'show',
        }

    def test_commands_are_command_objects(self):
        for cmd in registry.all_commands().values():
            assert isinstance(cmd, Command)

    def test_unknown(self):
        with pytest.raises(UnknownNameError):
            registry.get('nope')

    def test_module_for(self):
        assert registry.module_for('import-color') == 'import_color'

    def test_command_without_run(self):
        with pytest.raises(RuntimeError):
            Command('empty').execute(None, None)


class TestColorCommands:
    def test_convert(self, cli_env, capsys):
        _run(cli_env, 'convert', '#123', '--format', 'argb')
        assert capsys.readouterr().out.strip() == '0xff112233'

    def test_convert_default_abgr(self, cli_env, capsys):
        _run(cli_env, 'convert', '#11223344')
        assert capsys.readouterr().out.strip() == '0x44332211'

    def test_convert_invalid(self, cli_env, capsys):
        with pytest.raises(SystemExit) as exc:
            _run(cli_env, 'convert', '#1234')
        assert exc.value.code == 1
        assert 'Error:' in capsys.readouterr().err

    def test_import_color(self, cli_env, capsys):
        _run(cli_env, 'import-color', '0xff0000ff', '--format', 'argb')
        assert capsys.readouterr().out.strip() == '#0000ffff'

    def test_blend(self, cli_env, capsys):
        _run(cli_env, 'blend', '#ff000000', '#0000ffff')
        assert capsys.readouterr().out.strip() == '#0000ffff'


class TestSchemeCommands:
    def test_export_weasel(self, cli_env, capsys):
        _run(cli_env, 'export', WEASEL)
        lines = capsys.readouterr().out.strip().split('\n')
        assert lines[0] == "name: 'Ink Paper'"
        assert lines[1] == "author: 'Jane <jane@example.com>'"
        assert 'text_color: 0xff1e1e1e' in lines
        assert 'shadow_color: 0x30000000' in lines
        assert 'prevpage_color: 0xff888888' in lines
        assert lines[-1] == 'color_format: argb'
        assert not any(line.startswith('unknown_key') for line in lines)

    def test_export_color_format_override(self, cli_env, capsys):
        _run(cli_env, 'export', WEASEL, '--color-format', 'rgba')
        out = capsys.readouterr().out
        assert 'text_color: 0x1e1e1eff' in out
        assert out.strip().endswith('color_format: rgba')

    def test_export_squirrel_platform_flag(self, cli_env, capsys):
        main(['--prefs', str(cli_env), '--platform', 'squirrel', 'export', SQUIRREL])
        lines = capsys.readouterr().out.strip().split('\n')
        assert lines[-1] == 'color_space: display_p3'
        assert 'preedit_back_color: 0xffd0e8d8' in lines
        # preedit back feeds hilited back on squirrel
        assert 'hilited_back_color: 0xffd0e8d8' in lines
        # --platform is not persisted
        assert not cli_env.exists()

    def test_export_color_space_override(self, cli_env, capsys):
        main(['--prefs', str(cli_env), '--platform', 'squirrel', 'export', SQUIRREL, '--color-space', 'srgb'])
        assert capsys.readouterr().out.strip().endswith('color_space: srgb')

    def test_platform_from_env(self, cli_env, capsys, monkeypatch):
        monkeypatch.setenv('RIME_SCHEME_PLATFORM', 'squirrel')
        _run(cli_env, 'export', SQUIRREL)
        assert capsys.readouterr().out.strip().endswith('color_space: display_p3')

    def test_export_stdin(self, cli_env, capsys, monkeypatch):
        monkeypatch.setattr('sys.stdin', io.StringIO('text_color: 0xff332211\n'))
        _run(cli_env, 'export', '-')
        assert 'text_color: 0xff332211' in capsys.readouterr().out

    def test_export_bad_colour(self, cli_env, tmp_path, capsys):
        bad = tmp_path / 'bad.yaml'
        bad.write_text('text_color: 0x12\n')
        with pytest.raises(SystemExit) as exc:
            _run(cli_env, 'export', str(bad))
        assert exc.value.code == 1

    def test_missing_file(self, cli_env, capsys):
        with pytest.raises(SystemExit) as exc:
            _run(cli_env, 'show', 'does-not-exist.yaml')
        assert exc.value.code == 1
        assert 'Error:' in capsys.readouterr().err

    def test_show_text(self, cli_env, capsys):
        _run(cli_env, 'show', WEASEL)
        out = capsys.readouterr().out
        assert 'Ink Paper by Jane' in out
        assert 'weasel' in out
        assert 'show_pages: yes' in out

    def test_show_json(self, cli_env, capsys):
        _run(cli_env, 'show', WEASEL, '--json')
        data = json.loads(capsys.readouterr().out)
        assert data['platform'] == 'weasel'
        assert data['color_format'] == 'argb'
        assert data['colors']['text_color'] == {'value': '#1e1e1eff', 'override': '#1e1e1eff'}
        assert data['colors']['border_color'] == {'value': '#1e1e1eff', 'override': None}
        assert data['show_pages'] is True

    def test_preview(self, cli_env, tmp_path, capsys):
        out = tmp_path / 'out' / 'preview.png'
        _run(cli_env, 'preview', WEASEL, str(out))
        assert out.is_file()
        with Image.open(out) as img:
            assert img.mode == 'RGB'
            assert img.width > 0


class TestSavedCommands:
    def test_save_list_load_remove(self, cli_env, capsys):
        _run(cli_env, 'save', WEASEL)
        scheme_id = capsys.readouterr().out.strip()
        assert scheme_id.isdigit()

        _run(cli_env, 'saved')
        listing = capsys.readouterr().out
        assert scheme_id in listing
        assert 'Ink Paper' in listing

        _run(cli_env, 'load', scheme_id)
        loaded = capsys.readouterr().out
        assert 'text_color: 0xff1e1e1e' in loaded
        assert loaded.strip().endswith('color_format: argb')

        _run(cli_env, 'remove', scheme_id)
        capsys.readouterr()
        _run(cli_env, 'saved')
        assert capsys.readouterr().out.strip() == 'No saved schemes.'

    def test_load_unknown(self, cli_env, capsys):
        with pytest.raises(SystemExit) as exc:
            _run(cli_env, 'load', '42')
        assert exc.value.code == 1
        assert 'No saved scheme with id 42' in capsys.readouterr().err

    def test_remove_unknown_is_quiet(self, cli_env, capsys):
        _run(cli_env, 'remove', '42')
        assert capsys.readouterr().err == ''


class TestPlatformCommand:
    def test_default(self, cli_env, capsys):
        _run(cli_env, 'platform')
        assert capsys.readouterr().out.strip() == 'weasel'

    def test_set_persists(self, cli_env, capsys):
        _run(cli_env, 'platform', 'squirrel')
        capsys.readouterr()
        _run(cli_env, 'platform')
        assert capsys.readouterr().out.strip() == 'squirrel'
        assert json.loads(cli_env.read_text())['platform'] == 'squirrel'


class TestHelp:
    def test_help_lists_commands(self, cli_env, capsys):
        _run(cli_env, 'help')
        out = capsys.readouterr().out
        assert 'import-color' in out
        assert 'export' in out

    def test_help_for_command(self, cli_env, capsys):
        _run(cli_env, 'help', 'convert')
        assert "rime-scheme convert '#112233'" in capsys.readouterr().out

    def test_help_unknown(self, cli_env, capsys):
        with pytest.raises(SystemExit):
            _run(cli_env, 'help', 'nope')

    def test_no_command(self, cli_env, capsys):
        with pytest.raises(SystemExit) as exc:
            main([])
        assert exc.value.code == 1


class TestSetCommand:
    def test_from_scratch(self, cli_env, capsys):
        _run(cli_env, 'set', 'name=Dusk', 'text_color=#abc')
        lines = capsys.readouterr().out.strip().split('\n')
        assert lines[0] == "name: 'Dusk'"
        assert 'text_color: 0xffccbbaa' in lines
        assert lines[-1] == 'color_format: abgr'

    def test_edit_snippet(self, cli_env, capsys):
        _run(cli_env, 'set', '--from', WEASEL, 'hilited_candidate_back_color=#102030')
        lines = capsys.readouterr().out.strip().split('\n')
        assert 'hilited_candidate_back_color: 0xff102030' in lines
        assert 'text_color: 0xff1e1e1e' in lines
        assert lines[-1] == 'color_format: argb'

    def test_empty_value_unsets(self, cli_env, capsys):
        _run(cli_env, 'set', '--from', WEASEL, 'prevpage_color=')
        out = capsys.readouterr().out
        assert 'prevpage_color' not in out
        assert 'nextpage_color' not in out

    def test_unknown_key(self, cli_env, capsys):
        with pytest.raises(SystemExit) as exc:
            _run(cli_env, 'set', 'colour=#fff')
        assert exc.value.code == 1
        captured = capsys.readouterr()
        assert 'Unknown scheme field: colour' in captured.err
        assert captured.out == ''

    def test_bad_color(self, cli_env, capsys):
        with pytest.raises(SystemExit) as exc:
            _run(cli_env, 'set', 'text_color=#12')
        assert exc.value.code == 1
        assert 'Error:' in capsys.readouterr().err

    def test_missing_equals(self, cli_env, capsys):
        with pytest.raises(SystemExit) as exc:
            _run(cli_env, 'set', 'text_color')
        assert exc.value.code == 2

    def test_save(self, cli_env, capsys):
        _run(cli_env, 'set', 'name=Dusk', 'back_color=#223344', '--save')
        err = capsys.readouterr().err
        assert err.startswith('saved ')
        scheme_id = err.split()[1]

        _run(cli_env, 'saved')
        assert f'{scheme_id}  Dusk' in capsys.readouterr().out


class TestPrefsCommand:
    def test_lists_defaults(self, cli_env, capsys):
        _run(cli_env, 'prefs')
        lines = capsys.readouterr().out.strip().split('\n')
        assert lines[0] == 'platform: weasel'
        assert lines[1] == 'pageBackground: light'
        assert lines[2].startswith('pageLanguage: zh-Han')

    def test_set_persists(self, cli_env, capsys):
        _run(cli_env, 'prefs', 'pageBackground', 'dark')
        assert capsys.readouterr().out.strip() == 'pageBackground: dark'
        assert json.loads(cli_env.read_text())['pageBackground'] == 'dark'

    def test_rejects_value(self, cli_env, capsys):
        with pytest.raises(SystemExit) as exc:
            _run(cli_env, 'prefs', 'pageLanguage', 'en')
        assert exc.value.code == 1
        assert 'Unknown pageLanguage: en' in capsys.readouterr().err
        assert not cli_env.exists()

    def test_rejects_key(self, cli_env, capsys):
        with pytest.raises(SystemExit) as exc:
            _run(cli_env, 'prefs', 'saved', 'x')
        assert exc.value.code == 2


class TestPreviewBackground:
    XY = (BORDER + 2, BORDER + 2)

    def _clear_back(self, tmp_path: Path) -> str:
        snippet = tmp_path / 'clear.yaml'
        snippet.write_text('back_color: 0x00ffffff\ncolor_format: argb\n')
        return str(snippet)

    def test_stored_dark_background(self, cli_env, tmp_path, capsys):
        _run(cli_env, 'prefs', 'pageBackground', 'dark')
        out = tmp_path / 'dark.png'
        _run(cli_env, 'preview', self._clear_back(tmp_path), str(out))
        with Image.open(out) as img:
            assert img.getpixel(self.XY) == CANVAS['dark']

    def test_flag_overrides_stored(self, cli_env, tmp_path, capsys):
        _run(cli_env, 'prefs', 'pageBackground', 'dark')
        out = tmp_path / 'light.png'
        _run(cli_env, 'preview', self._clear_back(tmp_path), str(out), '--background', 'light')
        with Image.open(out) as img:
            assert img.getpixel(self.XY) == (255, 255, 255)


class TestErrorHandling:
    def test_internal_key_error_propagates(self, cli_env, monkeypatch):
        broken = Command('broken')

        @broken.run
        def run(store, args):
            return {}['missing']

        monkeypatch.setattr(registry, 'get', lambda name: broken)
        with pytest.raises(KeyError):
            _run(cli_env, 'saved')

    def test_unknown_name_is_user_error(self, cli_env, monkeypatch, capsys):
        def lookup(name):
            raise UnknownNameError(f'Unknown command: {name}')

        monkeypatch.setattr(registry, 'get', lookup)
        with pytest.raises(SystemExit) as exc:
            _run(cli_env, 'saved')
        assert exc.value.code == 1
        assert capsys.readouterr().err.strip() == 'Error: Unknown command: saved'
