from fuku.keys import Binding, default_key_map


def test_default_key_map_keys():
    km = default_key_map()
    assert "up" in km.up.keys
    assert "k" in km.up.keys
    assert "down" in km.down.keys
    assert "j" in km.down.keys
    assert "tab" in km.toggle_logs.keys
    assert "q" in km.quit.keys
    assert "ctrl+c" in km.force_quit.keys


def test_default_key_map_help():
    km = default_key_map()
    assert (km.up.help_key, km.up.help_desc) == ("↑/k", "up")
    assert (km.toggle_logs.help_key, km.toggle_logs.help_desc) == ("tab", "toggle view")
    assert (km.force_quit.help_key, km.force_quit.help_desc) == ("ctrl+c", "force quit")


def test_matches():
    km = default_key_map()
    assert km.up.matches("k")
    assert not km.up.matches("j")
    assert km.quit.matches("q")


def test_with_help_returns_new_binding():
    binding = Binding(("a",), "a", "old")
    changed = binding.with_help("a", "autoscroll")
    assert changed.help_desc == "autoscroll"
    assert changed.keys == binding.keys
    assert binding.help_desc == "old"