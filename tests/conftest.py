import pytest

JAVA_SOURCE = '''package com.example.app;

public class MainActivity extends Activity {
    void greet() {
        String a = "Hello";
    }

    void again() {
        String a = "Hello";
        log("World");
    }
}
'''

LAYOUT_SOURCE = '''<?xml version="1.0" encoding="utf-8"?>
<LinearLayout xmlns:android="http://schemas.android.com/apk/res/android">
    <TextView android:id="@+id/title" android:text="Hi" />
    <TextView android:label="@string/existing" android:hint="?attr/hint" />
</LinearLayout>
'''


@pytest.fixture
def java_file(tmp_path):
    path = tmp_path / 'MainActivity.java'
    path.write_text(JAVA_SOURCE, encoding='utf-8')
    return path


@pytest.fixture
def layout_file(tmp_path):
    path = tmp_path / 'activity_main.xml'
    path.write_text(LAYOUT_SOURCE, encoding='utf-8')
    return path


@pytest.fixture
def values_dir(tmp_path):
    path = tmp_path / 'res' / 'values'
    path.mkdir(parents=True)
    return path
