"""Tests for the Go analyzer passes."""

import pytest

from repo_buddy.casing import Casing

SERVICE = """package service

import (
	"fmt"

	"github.com/gin-gonic/gin"
	"gorm.io/gorm"
)

type UserRepository interface {
	Find(id int) error
}

type userService struct {
	repo UserRepository
	db   *gorm.DB
}

func NewUserService(repo UserRepository) *userService {
	return &userService{repo: repo}
}

func (s *userService) Handle(c *gin.Context) error {
	userName := c.Param("name")
	if err := s.repo.Find(1); err != nil {
		panic(err)
	}
	fmt.Println(userName)
	return nil
}
"""


@pytest.fixture
def service_findings(analyze_source):
    return analyze_source("internal/service/user_service.go", SERVICE)


class TestNaming:
    def test_first_casing_per_axis(self, service_findings):
        naming = service_findings.naming
        assert naming.function_casing == Casing.PASCAL_CASE
        assert naming.class_struct_naming == Casing.PASCAL_CASE
        assert naming.variable_casing == Casing.CAMEL_CASE

    def test_file_naming_left_to_orchestrator(self, service_findings):
        assert service_findings.naming.file_naming is None

    def test_unknown_casing_is_recorded(self, analyze_source):
        findings = analyze_source("a.go", "package a\n\nvar My_Weird_name = 1\n")
        assert findings.naming.variable_casing == Casing.UNKNOWN

    def test_var_spec(self, analyze_source):
        findings = analyze_source("a.go", "package a\n\nvar MAX_RETRY = 3\n")
        assert findings.naming.variable_casing == Casing.UPPER_SNAKE_CASE

    def test_interface_prefix(self, analyze_source):
        findings = analyze_source("a.go", "package a\n\ntype IUserRepository interface {\n\tFind() error\n}\n")
        assert findings.naming.interface_prefix == "I"

    def test_no_interface_prefix(self, service_findings):
        assert service_findings.naming.interface_prefix is None


class TestErrorHandling:
    def test_nil_check_and_panic(self, service_findings):
        assert service_findings.error_handling.failure_patterns == ["if err != nil", "panic()"]

    def test_nil_check_on_any_identifier(self, analyze_source):
        source = "package a\n\nfunc f(x *int) {\n\tif x != nil {\n\t\treturn\n\t}\n}\n"
        assert analyze_source("a.go", source).error_handling.failure_patterns == ["if err != nil"]

    def test_equality_check_is_not_error_handling(self, analyze_source):
        source = "package a\n\nfunc f(err error) bool {\n\tif err == nil {\n\t\treturn true\n\t}\n\treturn false\n}\n"
        assert analyze_source("a.go", source).error_handling.failure_patterns == []


class TestConstructorsAndPatterns:
    def test_new_function_is_constructor_injection(self, service_findings):
        assert service_findings.di.injection_patterns == ["Constructor Injection (NewXXX)"]

    def test_factory_and_strategy(self, service_findings):
        patterns = service_findings.design_patterns.patterns
        assert "Factory Pattern (NewXXX)" in patterns
        assert "Strategy Pattern (via Interfaces)" in patterns

    def test_lowercase_new_is_not_a_factory(self, analyze_source):
        findings = analyze_source("a.go", "package a\n\nfunc Newline() {}\n\nfunc newThing() {}\n")
        assert findings.di.injection_patterns == []
        assert findings.design_patterns.patterns == []

    def test_singleton(self, analyze_source):
        source = "package a\n\nvar instance *Config\n\ntype Config struct{}\n\nfunc GetInstance() *Config {\n\treturn instance\n}\n"
        assert analyze_source("a.go", source).design_patterns.patterns == ["Potential Singleton (GetInstance)"]


class TestTesting:
    def test_mock_and_assertion_imports(self, analyze_source):
        source = """package service

import (
	"testing"

	"github.com/golang/mock/gomock"
	"github.com/stretchr/testify/assert"
)

func TestFind(t *testing.T) {
	ctrl := gomock.NewController(t)
	defer ctrl.Finish()
	assert.True(t, true)
}
"""
        testing = analyze_source("service/user_test.go", source).testing
        assert testing.mocking_strategy == "gomock"
        assert testing.assertion_style == "testify/assert"

    def test_gomock_call_without_known_import(self, analyze_source):
        source = "package a\n\nfunc f(t T) {\n\tgomock.NewController(t)\n}\n"
        assert analyze_source("a.go", source).testing.mocking_strategy == "gomock"

    def test_testify_mock(self, analyze_source):
        source = 'package a\n\nimport "github.com/stretchr/testify/mock"\n\ntype M struct{ mock.Mock }\n'
        assert analyze_source("a.go", source).testing.mocking_strategy == "testify/mock"


class TestTechStack:
    def test_detected_from_imports(self, service_findings):
        tech = service_findings.tech_stack
        assert tech.frameworks == ["Gin"]
        assert tech.databases == ["GORM"]
        assert tech.libraries == []

    def test_testing_libraries(self, analyze_source):
        source = 'package a\n\nimport (\n\t"github.com/stretchr/testify/require"\n\t"go.uber.org/zap"\n)\n'
        assert analyze_source("a.go", source).tech_stack.libraries == ["Testify", "Zap"]


class TestDuplication:
    def test_repeated_literal(self, analyze_source):
        source = """package a

func f() []string {
	return []string{"user not found error", "user not found error", "user not found error", "short", "short"}
}
"""
        dry = analyze_source("a.go", source).dry
        assert dry.duplication_score == pytest.approx(0.2)
        assert dry.duplicated_blocks == ['String literal "user not found error" repeated 3 times']

    def test_raw_strings_count(self, analyze_source):
        source = "package a\n\nvar a = `select * from users`\nvar b = \"select * from users\"\n"
        assert analyze_source("a.go", source).dry.duplication_score == pytest.approx(0.1)

    def test_unique_literals(self, service_findings):
        assert service_findings.dry.duplication_score == 0.0
        assert service_findings.dry.duplicated_blocks == []
