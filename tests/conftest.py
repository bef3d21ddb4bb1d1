import sys
from pathlib import Path

import pytest


def _add_src_to_path() -> None:
    root = Path(__file__).resolve().parents[1]
    src_path = root / "src"
    if str(src_path) not in sys.path:
        sys.path.insert(0, str(src_path))


_add_src_to_path()


SAMPLE_REPORT_XML = """<?xml version="1.0" encoding="utf-8"?>
<CodeMetricsReport Version="1.0">
  <Targets>
    <Target Name="Foo.Bar.csproj">
      <Assembly Name="Foo.Bar, Version=1.2.3.4, Culture=neutral, PublicKeyToken=null">
        <Metrics>
          <Metric Name="MaintainabilityIndex" Value="82" />
          <Metric Name="CyclomaticComplexity" Value="1234" />
          <Metric Name="ClassCoupling" Value="41" />
          <Metric Name="DepthOfInheritance" Value="3" />
          <Metric Name="SourceLines" Value="5210" />
          <Metric Name="ExecutableLines" Value="1800" />
        </Metrics>
        <Namespaces>
          <Namespace Name="App">
            <Metrics>
              <Metric Name="MaintainabilityIndex" Value="77" />
            </Metrics>
            <Types>
              <NamedType Name="Widget">
                <Metrics>
                  <Metric Name="MaintainabilityIndex" Value="80" />
                  <Metric Name="CyclomaticComplexity" Value="10" />
                  <Metric Name="ClassCoupling" Value="5" />
                  <Metric Name="DepthOfInheritance" Value="1" />
                  <Metric Name="SourceLines" Value="50" />
                  <Metric Name="ExecutableLines" Value="40" />
                </Metrics>
                <Members>
                  <Method Name="Render() : void">
                    <Metrics>
                      <Metric Name="MaintainabilityIndex" Value="70" />
                      <Metric Name="CyclomaticComplexity" Value="55" />
                      <Metric Name="ClassCoupling" Value="31" />
                      <Metric Name="SourceLines" Value="20" />
                      <Metric Name="ExecutableLines" Value="12" />
                    </Metrics>
                  </Method>
                  <Field Name="_size" />
                  <Property Name="Size">
                    <Metrics>
                      <Metric Name="MaintainabilityIndex" Value="98" />
                      <Metric Name="CyclomaticComplexity" Value="2" />
                      <Metric Name="SourceLines" Value="3" />
                      <Metric Name="ExecutableLines" Value="1" />
                    </Metrics>
                  </Property>
                  <Event Name="Changed">
                    <Metrics>
                      <Metric Name="MaintainabilityIndex" Value="100" />
                    </Metrics>
                  </Event>
                  <Method Name="">
                    <Metrics />
                  </Method>
                </Members>
              </NamedType>
              <NamedType Name="Gadget">
                <Metrics>
                  <Metric Name="MaintainabilityIndex" Value="55" />
                  <Metric Name="CyclomaticComplexity" Value="120" />
                  <Metric Name="ClassCoupling" Value="60" />
                  <Metric Name="SourceLines" Value="1500" />
                  <Metric Name="ExecutableLines" Value="1100" />
                </Metrics>
              </NamedType>
            </Types>
          </Namespace>
          <Namespace Name="App.Data">
            <Types>
              <NamedType Name="Repository&lt;T&gt;">
                <Metrics>
                  <Metric Name="MaintainabilityIndex" Value="65" />
                  <Metric Name="CyclomaticComplexity" Value="75" />
                  <Metric Name="ClassCoupling" Value="30" />
                  <Metric Name="SourceLines" Value="700" />
                </Metrics>
                <Members>
                  <Method Name="Get(int) : T">
                    <Metrics>
                      <Metric Name="MaintainabilityIndex" Value="60" />
                      <Metric Name="CyclomaticComplexity" Value="4" />
                      <Metric Name="ClassCoupling" Value="2" />
                      <Metric Name="SourceLines" Value="9" />
                      <Metric Name="ExecutableLines" Value="5" />
                    </Metrics>
                  </Method>
                </Members>
              </NamedType>
            </Types>
          </Namespace>
        </Namespaces>
      </Assembly>
    </Target>
  </Targets>
</CodeMetricsReport>
"""


@pytest.fixture
def sample_report_xml() -> str:
    return SAMPLE_REPORT_XML
